from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Airport:
    code: str
    name: str
    city: str
    country: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_japanese(self) -> bool:
        return self.country == "Japan"


_AIRPORT_ROWS = [
    # Kanto
    ('HND', 'Tokyo Haneda', 'Tokyo', 'Japan', 35.5494, 139.7798),
    ('NRT', 'Tokyo Narita', 'Tokyo', 'Japan', 35.7647, 140.3864),
    # Kansai
    ('ITM', 'Osaka Itami', 'Osaka', 'Japan', 34.7847, 135.4381),
    ('KIX', 'Kansai International', 'Osaka', 'Japan', 34.4347, 135.2441),
    ('UKB', 'Kobe', 'Kobe', 'Japan', 34.6328, 135.2239),
    # Chubu / Hokuriku
    ('NGO', 'Chubu Centrair', 'Nagoya', 'Japan', 34.8584, 136.8054),
    ('KMQ', 'Komatsu', 'Komatsu', 'Japan', 36.3946, 136.4068),
    ('TOY', 'Toyama', 'Toyama', 'Japan', 36.6483, 137.1875),
    ('KIJ', 'Niigata', 'Niigata', 'Japan', 37.9559, 139.1207),
    # Hokkaido
    ('CTS', 'New Chitose', 'Sapporo', 'Japan', 42.7753, 141.6922),
    ('HKD', 'Hakodate', 'Hakodate', 'Japan', 41.7700, 140.8219),
    ('AKJ', 'Asahikawa', 'Asahikawa', 'Japan', 43.6708, 142.4475),
    ('OBO', 'Tokachi-Obihiro', 'Obihiro', 'Japan', 42.7333, 143.2172),
    ('KUH', 'Kushiro', 'Kushiro', 'Japan', 43.0411, 144.1928),
    ('MMB', 'Memanbetsu', 'Ozora', 'Japan', 43.8806, 144.1641),
    # Tohoku
    ('SDJ', 'Sendai', 'Sendai', 'Japan', 38.1397, 140.9170),
    ('AOJ', 'Aomori', 'Aomori', 'Japan', 40.7347, 140.6908),
    ('AXT', 'Akita', 'Akita', 'Japan', 39.6156, 140.2186),
    # Chugoku / Shikoku
    ('HIJ', 'Hiroshima', 'Hiroshima', 'Japan', 34.4361, 132.9194),
    ('OKJ', 'Okayama', 'Okayama', 'Japan', 34.7569, 133.8553),
    ('YGJ', 'Yonago', 'Yonago', 'Japan', 35.4922, 133.2364),
    ('UBJ', 'Yamaguchi Ube', 'Ube', 'Japan', 33.9300, 131.2790),
    ('TAK', 'Takamatsu', 'Takamatsu', 'Japan', 34.2142, 134.0156),
    ('TKS', 'Tokushima', 'Tokushima', 'Japan', 34.1328, 134.6067),
    ('KCZ', 'Kochi Ryoma', 'Kochi', 'Japan', 33.5461, 133.6694),
    ('MYJ', 'Matsuyama', 'Matsuyama', 'Japan', 33.8272, 132.6997),
    # Kyushu / Okinawa
    ('FUK', 'Fukuoka', 'Fukuoka', 'Japan', 33.5856, 130.4506),
    ('KMJ', 'Kumamoto', 'Kumamoto', 'Japan', 32.8373, 130.8551),
    ('KOJ', 'Kagoshima', 'Kagoshima', 'Japan', 31.8034, 130.7195),
    ('KMI', 'Miyazaki', 'Miyazaki', 'Japan', 31.8772, 131.4486),
    ('NGS', 'Nagasaki', 'Nagasaki', 'Japan', 32.9169, 129.9136),
    ('OIT', 'Oita', 'Oita', 'Japan', 33.4794, 131.7367),
    ('OKA', 'Naha', 'Naha', 'Japan', 26.1958, 127.6458),
    ('MMY', 'Miyako', 'Miyakojima', 'Japan', 24.7828, 125.2950),
    ('ISG', 'New Ishigaki', 'Ishigaki', 'Japan', 24.3964, 124.2450),
    # Korea / East Asia
    ('ICN', 'Incheon', 'Seoul', 'South Korea', 37.4602, 126.4407),
    ('GMP', 'Gimpo', 'Seoul', 'South Korea', 37.5583, 126.7906),
    ('PUS', 'Gimhae', 'Busan', 'South Korea', 35.1796, 128.9382),
    ('TPE', 'Taoyuan', 'Taipei', 'Taiwan', 25.0797, 121.2342),
    ('TSA', 'Songshan', 'Taipei', 'Taiwan', 25.0694, 121.5525),
    ('HKG', 'Hong Kong', 'Hong Kong', 'Hong Kong', 22.3080, 113.9185),
    ('MFM', 'Macau', 'Macau', 'Macau', 22.1496, 113.5916),
    ('PEK', 'Beijing Capital', 'Beijing', 'China', 40.0799, 116.6031),
    ('PVG', 'Pudong', 'Shanghai', 'China', 31.1443, 121.8083),
    ('SHA', 'Hongqiao', 'Shanghai', 'China', 31.1979, 121.3363),
    # Southeast / South Asia
    ('SIN', 'Changi', 'Singapore', 'Singapore', 1.3644, 103.9915),
    ('BKK', 'Suvarnabhumi', 'Bangkok', 'Thailand', 13.6900, 100.7501),
    ('KUL', 'Kuala Lumpur', 'Kuala Lumpur', 'Malaysia', 2.7456, 101.7099),
    ('MNL', 'Ninoy Aquino', 'Manila', 'Philippines', 14.5086, 121.0194),
    ('SGN', 'Tan Son Nhat', 'Ho Chi Minh City', 'Vietnam', 10.8188, 106.6519),
    ('CGK', 'Soekarno-Hatta', 'Jakarta', 'Indonesia', -6.1256, 106.6559),
    ('DEL', 'Indira Gandhi', 'Delhi', 'India', 28.5562, 77.1000),
    # Pacific
    ('HNL', 'Daniel K. Inouye', 'Honolulu', 'United States', 21.3187, -157.9225),
    ('KOA', 'Kona', 'Kona', 'United States', 19.7388, -156.0456),
    ('GUM', 'Antonio B. Won Pat', 'Guam', 'United States', 13.4834, 144.7960),
    ('SPN', 'Saipan', 'Saipan', 'United States', 15.1190, 145.7290),
    # North America
    ('LAX', 'Los Angeles International', 'Los Angeles', 'United States', 33.9425, -118.4081),
    ('SFO', 'San Francisco International', 'San Francisco', 'United States', 37.6213, -122.3790),
    ('SEA', 'Seattle-Tacoma', 'Seattle', 'United States', 47.4502, -122.3088),
    ('SJC', 'San Jose', 'San Jose', 'United States', 37.3639, -121.9289),
    ('JFK', 'John F Kennedy', 'New York', 'United States', 40.6413, -73.7781),
    ('ORD', "O'Hare", 'Chicago', 'United States', 41.9742, -87.9073),
    ('IAD', 'Dulles', 'Washington', 'United States', 38.9531, -77.4565),
    ('DFW', 'Dallas Fort Worth', 'Dallas', 'United States', 32.8998, -97.0403),
    ('YVR', 'Vancouver International', 'Vancouver', 'Canada', 49.1967, -123.1815),
    ('YYZ', 'Toronto Pearson', 'Toronto', 'Canada', 43.6777, -79.6248),
    # Europe
    ('LHR', 'Heathrow', 'London', 'United Kingdom', 51.4700, -0.4543),
    ('CDG', 'Charles de Gaulle', 'Paris', 'France', 49.0097, 2.5479),
    ('FRA', 'Frankfurt', 'Frankfurt', 'Germany', 50.0379, 8.5622),
    ('MUC', 'Munich', 'Munich', 'Germany', 48.3537, 11.7750),
    ('AMS', 'Schiphol', 'Amsterdam', 'Netherlands', 52.3105, 4.7683),
    ('ZRH', 'Zurich', 'Zurich', 'Switzerland', 47.4582, 8.5555),
    ('FCO', 'Fiumicino', 'Rome', 'Italy', 41.8003, 12.2389),
    ('HEL', 'Helsinki-Vantaa', 'Helsinki', 'Finland', 60.3172, 24.9633),
    # Oceania
    ('SYD', 'Sydney', 'Sydney', 'Australia', -33.9399, 151.1753),
    ('MEL', 'Melbourne', 'Melbourne', 'Australia', -37.6690, 144.8410),
    ('PER', 'Perth', 'Perth', 'Australia', -31.9385, 115.9672),
    ('AKL', 'Auckland International', 'Auckland', 'New Zealand', -37.0082, 174.7850),
    # Middle East
    ('DXB', 'Dubai International', 'Dubai', 'United Arab Emirates', 25.2532, 55.3657),
    ('DOH', 'Hamad International', 'Doha', 'Qatar', 25.2731, 51.6081),
]

AIRPORTS: dict[str, Airport] = {
    row[0]: Airport(*row) for row in _AIRPORT_ROWS
}

# Route distances in km, stored one way only. Reverse pairs are resolved by lookup.
ROUTE_DISTANCES_KM: dict[tuple[str, str], int] = {
    # Domestic
    ('HND', 'ITM'): 620,
    ('HND', 'KIX'): 660,
    ('HND', 'CTS'): 820,
    ('HND', 'FUK'): 880,
    ('HND', 'OKA'): 1570,
    ('NRT', 'CTS'): 840,
    ('NRT', 'FUK'): 900,
    ('NRT', 'KIX'): 700,
    ('ITM', 'CTS'): 1100,
    ('KIX', 'CTS'): 1100,
    ('KIX', 'OKA'): 1200,
    ('NGO', 'OKA'): 1350,
    # North America
    ('NRT', 'LAX'): 8770,
    ('HND', 'LAX'): 8770,
    ('NRT', 'JFK'): 10870,
    ('HND', 'JFK'): 10870,
    ('NRT', 'SFO'): 8280,
    # Europe
    ('NRT', 'LHR'): 9590,
    ('HND', 'LHR'): 9590,
    ('NRT', 'CDG'): 9700,
    ('HND', 'CDG'): 9700,
    ('NRT', 'FRA'): 9370,
    # Asia
    ('NRT', 'ICN'): 1160,
    ('HND', 'ICN'): 1160,
    ('KIX', 'ICN'): 870,
    ('NRT', 'TPE'): 2100,
    ('HND', 'TPE'): 2100,
    ('NRT', 'HKG'): 2960,
    ('HND', 'HKG'): 2960,
    ('NRT', 'SIN'): 5300,
    ('HND', 'SIN'): 5300,
    ('NRT', 'BKK'): 4580,
    ('HND', 'BKK'): 4580,
    # Oceania
    ('NRT', 'SYD'): 7820,
    ('HND', 'SYD'): 7820,
}

# Used when either airport has no coordinates.
DEFAULT_DISTANCE_KM = 1000

# Airports where placeholder offers are generated for missing domestic carriers.
DOMESTIC_MARKET = frozenset({
    'HND', 'NRT', 'KIX', 'ITM', 'CTS', 'FUK', 'OKA', 'NGO', 'SDJ', 'KMJ',
})


def get_airport(code: str) -> Optional[Airport]:
    return AIRPORTS.get((code or "").upper())


def is_domestic_route(origin: str, destination: str) -> bool:
    a, b = get_airport(origin), get_airport(destination)
    return bool(a and b and a.is_japanese and b.is_japanese)


def in_domestic_market(origin: str, destination: str) -> bool:
    return origin.upper() in DOMESTIC_MARKET and destination.upper() in DOMESTIC_MARKET
