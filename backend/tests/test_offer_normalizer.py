"""Tests for offer deduplication and per-carrier diversification."""
from milecompass.models.offer import RawOffer
from milecompass.services.offer_normalizer import OfferNormalizer


def _make_offer(**overrides) -> RawOffer:
    defaults = {
        "carrier_code": "NH",
        "carrier_name": "ANA",
        "flight_number": "NH15",
        "departure_time": "07:00",
        "arrival_time": "08:05",
        "price": 22000,
        "taxes": 0,
        "offer_id": "",
    }
    defaults.update(overrides)
    return RawOffer(**defaults)


class TestDeduplicate:
    def test_exact_repeat_dropped_first_kept(self):
        offers = [
            _make_offer(offer_id="first"),
            _make_offer(offer_id="second"),
        ]
        result = OfferNormalizer.deduplicate(offers)
        assert [o.offer_id for o in result] == ["first"]

    def test_different_departure_is_not_duplicate(self):
        offers = [_make_offer(), _make_offer(departure_time="09:00")]
        assert len(OfferNormalizer.deduplicate(offers)) == 2

    def test_different_price_is_not_duplicate(self):
        offers = [_make_offer(), _make_offer(price=23000)]
        assert len(OfferNormalizer.deduplicate(offers)) == 2

    def test_carrier_name_used_when_code_missing(self):
        offers = [
            _make_offer(carrier_code="", carrier_name="全日空", offer_id="a"),
            _make_offer(carrier_code="", carrier_name="全日空", offer_id="b"),
        ]
        assert [o.offer_id for o in OfferNormalizer.deduplicate(offers)] == ["a"]


class TestDiversify:
    def test_cap_keeps_only_cheapest(self):
        prices = [30000, 28000, 31000, 29000, 27000]
        offers = [
            _make_offer(price=p, departure_time=f"{7 + i:02d}:00", offer_id=str(p))
            for i, p in enumerate(prices)
        ]
        result = OfferNormalizer().normalize(offers)
        assert len(result) == 1
        assert result[0].price == 27000

    def test_group_at_cap_kept_whole(self):
        offers = [
            _make_offer(price=30000, departure_time="07:00"),
            _make_offer(price=25000, departure_time="09:00"),
        ]
        result = OfferNormalizer().normalize(offers)
        assert [o.price for o in result] == [30000, 25000]

    def test_relative_order_preserved(self):
        offers = [
            _make_offer(carrier_code="JL", price=26000, offer_id="jl1"),
            _make_offer(price=30000, departure_time="07:00", offer_id="nh1"),
            _make_offer(carrier_code="BC", price=15000, offer_id="bc1"),
            _make_offer(price=24000, departure_time="10:00", offer_id="nh2"),
            _make_offer(price=28000, departure_time="13:00", offer_id="nh3"),
            _make_offer(carrier_code="JL", price=27000, departure_time="12:00", offer_id="jl2"),
        ]
        result = OfferNormalizer().normalize(offers)
        assert [o.offer_id for o in result] == ["jl1", "bc1", "nh2", "jl2"]

    def test_price_tie_keeps_earliest(self):
        offers = [
            _make_offer(price=27000, departure_time="07:00", offer_id="a"),
            _make_offer(price=27000, departure_time="11:00", offer_id="b"),
            _make_offer(price=30000, departure_time="15:00", offer_id="c"),
        ]
        result = OfferNormalizer().normalize(offers)
        assert [o.offer_id for o in result] == ["a"]

    def test_no_carrier_exceeds_cap(self):
        offers = []
        for code in ("NH", "JL", "BC"):
            for i in range(4):
                offers.append(_make_offer(carrier_code=code, price=20000 + i * 100, departure_time=f"{8 + i}:00"))
        result = OfferNormalizer().normalize(offers)
        for code in ("NH", "JL", "BC"):
            assert len([o for o in result if o.carrier_code == code]) <= 2

    def test_custom_cap(self):
        offers = [_make_offer(price=20000 + i, departure_time=f"{8 + i}:00") for i in range(3)]
        assert len(OfferNormalizer(cap=3).normalize(offers)) == 3
        assert len(OfferNormalizer(cap=1).normalize(offers)) == 1


class TestNormalize:
    def test_show_all_time_slots_bypasses_everything(self):
        offers = [_make_offer(), _make_offer()] + [
            _make_offer(price=20000 + i, departure_time=f"{10 + i}:00") for i in range(5)
        ]
        result = OfferNormalizer().normalize(offers, show_all_time_slots=True)
        assert result == offers
        assert result is not offers

    def test_idempotent(self):
        offers = [
            _make_offer(price=30000, departure_time="07:00"),
            _make_offer(price=30000, departure_time="07:00"),
            _make_offer(carrier_code="JL", price=26000),
            _make_offer(price=24000, departure_time="10:00"),
            _make_offer(price=28000, departure_time="13:00"),
        ]
        normalizer = OfferNormalizer()
        once = normalizer.normalize(offers)
        assert normalizer.normalize(once) == once

    def test_empty(self):
        assert OfferNormalizer().normalize([]) == []


class TestCarrierIdentity:
    def test_aliases_share_one_identity(self):
        offers = [
            _make_offer(carrier_code="NH", price=30000, departure_time="07:00", offer_id="code"),
            _make_offer(carrier_code="nh", price=28000, departure_time="09:00", offer_id="lower"),
            _make_offer(carrier_code="", carrier_name="ANA", price=29000, departure_time="11:00", offer_id="name"),
            _make_offer(carrier_code="", carrier_name="全日空", price=31000, departure_time="13:00", offer_id="ja"),
        ]
        result = OfferNormalizer().normalize(offers)
        assert [o.offer_id for o in result] == ["lower"]

    def test_alias_duplicate_dropped(self):
        offers = [
            _make_offer(carrier_code="NH", offer_id="a"),
            _make_offer(carrier_code="ANA", offer_id="b"),
        ]
        assert [o.offer_id for o in OfferNormalizer.deduplicate(offers)] == ["a"]

    def test_unknown_carriers_grouped_case_insensitively(self):
        offers = [
            _make_offer(carrier_code="ZZ", carrier_name="", price=20000 + i, departure_time=f"{8 + i}:00")
            for i in range(2)
        ] + [_make_offer(carrier_code="zz", carrier_name="", price=19000, departure_time="12:00")]
        result = OfferNormalizer().normalize(offers)
        assert [o.price for o in result] == [19000]
