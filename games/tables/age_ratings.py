# games/tables/age_ratings.py
"""
IGDB age rating enum (the `rating` field of /age_ratings) -> label.
"""

UNKNOWN_RATING = "Unknown"

AGE_RATING_LABELS = {
    # PEGI
    1: "PEGI 3",
    2: "PEGI 7",
    3: "PEGI 12",
    4: "PEGI 16",
    5: "PEGI 18",
    # ESRB
    6: "ESRB RP",
    7: "ESRB EC",
    8: "ESRB E",
    9: "ESRB E10+",
    10: "ESRB T",
    11: "ESRB M",
    12: "ESRB AO",
    # CERO
    13: "CERO A",
    14: "CERO B",
    15: "CERO C",
    16: "CERO D",
    17: "CERO Z",
    # USK
    18: "USK 0",
    19: "USK 6",
    20: "USK 12",
    21: "USK 16",
    22: "USK 18",
    # GRAC
    23: "GRAC All",
    24: "GRAC 12",
    25: "GRAC 15",
    26: "GRAC 18",
    27: "GRAC Testing",
    # ClassInd
    28: "ClassInd L",
    29: "ClassInd 10",
    30: "ClassInd 12",
    31: "ClassInd 14",
    32: "ClassInd 16",
    33: "ClassInd 18",
    # ACB
    34: "ACB G",
    35: "ACB PG",
    36: "ACB M",
    37: "ACB MA15+",
    38: "ACB R18+",
    39: "ACB RC",
}
