"""Tabulated DeltaT values for Meeus (1998).

``MEEUS_1998_TABLE`` holds DeltaT in tenths of a second at two-year steps
from 1620 through 2000 (191 values).  Index ``i`` is the year
``1620 + 2*i``.

References:
    1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, Willmann-Bell, 1998,
       Table 10.A.
"""

MEEUS_1998_FIRST_YEAR = 1620
MEEUS_1998_STEP_YEARS = 2

# Index 101 (1822) reads 11 between 116 and 102; kept as published.
MEEUS_1998_TABLE: tuple[int, ...] = (
    # 1620..1699
    1210, 1120, 1030, 950, 880, 820, 770, 720, 680, 630, 600, 560, 530, 510, 480,
    460, 440, 420, 400, 380, 350, 330, 310, 290, 260, 240, 220, 200, 180, 160,
    140, 120, 110, 100, 90, 80, 70, 70, 70, 70,
    # 1700..1749
    70, 70, 80, 80, 90, 90, 90, 90, 90, 100, 100, 100, 100, 100, 100, 100, 100,
    110, 110, 110, 110, 110, 120, 120, 120,
    # 1750..1799
    120, 130, 130, 130, 140, 140, 140, 140, 150, 150, 150, 150, 150, 160, 160,
    160, 160, 160, 160, 160, 160, 150, 150, 140, 130,
    # 1800..1849
    131, 125, 122, 120, 120, 120, 120, 120, 120, 119, 116, 11, 102, 92, 82, 71,
    62, 56, 54, 53, 54, 56, 59, 62, 65,
    # 1850..1899
    68, 71, 73, 75, 76, 77, 73, 62, 52, 27, 14, -12, -28, -38, -48, -55, -53,
    -56, -57, -59, -60, -63, -65, -62, -47,
    # 1900..1949
    -28, -1, 26, 53, 77, 104, 133, 160, 182, 202, 211, 224, 235, 238, 243, 240,
    239, 239, 237, 240, 243, 253, 262, 273, 282,
    # 1950..2000
    291, 300, 307, 314, 322, 331, 340, 350, 365, 383, 402, 422, 445, 465, 485,
    505, 522, 538, 549, 558, 569, 583, 600, 616, 630, 650,
)
