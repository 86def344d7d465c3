# games/tables/platforms.py
"""
IGDB platform id -> display name.
"""

PLATFORM_NAMES = {
    158: "Commodore CDTV",
    339: "Sega Pico",
    8: "PlayStation 2",
    39: "iOS",
    94: "Commodore Plus/4",
    144: "AY-3-8710",
    88: "Odyssey",
    90: "Commodore PET",
    237: "Sol-20",
    6: "PC (Microsoft Windows)",
    44: "Tapwave Zodiac",
    68: "ColecoVision",
    129: "Texas Instruments TI-99",
    134: "Acorn Electron",
    378: "Gamate",
    135: "Hyper Neo Geo 64",
    156: "Thomson MO5",
    133: "Odyssey 2 / Videopac G7000",
    163: "SteamVR",
    142: "PC-50X Family",
    148: "AY-3-8607",
    146: "AY-3-8605",
    147: "AY-3-8606",
    149: "PC-98",
    25: "Amstrad CPC",
    381: "Playdate",
    51: "Family Computer Disk System",
    123: "WonderSwan Color",
    136: "Neo Geo CD",
    35: "Sega Game Gear",
    62: "Atari Jaguar",
    50: "3DO Interactive Multiplayer",
    89: "Microvision",
    128: "PC Engine SuperGrafx",
    150: "Turbografx-16/PC Engine CD",
    23: "Dreamcast",
    65: "Atari 8-bit",
    70: "Vectrex",
    85: "Donner Model 30",
    97: "PDP-8",
    98: "DEC GT40",
    112: "Microcomputer",
    101: "Ferranti Nimrod Computer",
    115: "Apple IIGS",
    13: "DOS",
    124: "SwanCrystal",
    127: "Fairchild Channel F",
    125: "PC-8801",
    87: "Virtual Boy",
    126: "TRS-80",
    130: "Nintendo Switch",
    132: "Amazon Fire TV",
    138: "VC 4000",
    139: "1292 Advanced Programmable Video System",
    155: "Tatung Einstein",
    159: "Nintendo DSi",
    119: "Neo Geo Pocket",
    153: "Dragon 32/64",
    154: "Amstrad PCW",
    11: "Xbox",
    108: "PDP-11",
    53: "MSX2",
    60: "Atari 7800",
    78: "Sega CD",
    24: "Game Boy Advance",
    30: "Sega 32X",
    140: "AY-3-8500",
    143: "AY-3-8760",
    145: "AY-3-8603",
    4: "Nintendo 64",
    120: "Neo Geo Pocket Color",
    41: "Wii U",
    77: "Sharp X1",
    82: "Web browser",
    109: "CDC Cyber 70",
    113: "OnLive Game System",
    116: "Acorn Archimedes",
    114: "Amiga CD32",
    117: "Philips CD-i",
    121: "Sharp X68000",
    122: "Nuon",
    18: "Nintendo Entertainment System",
    141: "AY-3-8610",
    37: "Nintendo 3DS",
    22: "Game Boy Color",
    64: "Sega Master System/Mark III",
    16: "Amiga",
    38: "PlayStation Portable",
    86: "TurboGrafx-16/PC Engine",
    162: "Oculus VR",
    308: "Playdia",
    9: "PlayStation 3",
    14: "Mac",
    306: "Satellaview",
    32: "Sega Saturn",
    34: "Android",
    15: "Commodore C64/128/MAX",
    66: "Atari 5200",
    67: "Intellivision",
    73: "BlackBerry OS",
    307: "Game & Watch",
    111: "Imlac PDS-1",
    118: "FM Towns",
    131: "Nintendo PlayStation",
    157: "NEC PC-6000 Series",
    152: "FM-7",
    20: "Nintendo DS",
    63: "Atari ST/STE",
    46: "PlayStation Vita",
    48: "PlayStation 4",
    61: "Atari Lynx",
    93: "Commodore 16",
    21: "Nintendo GameCube",
    42: "N-Gage",
    19: "Super Nintendo Entertainment System",
    374: "Sharp MZ-2200",
    58: "Super Famicom",
    375: "Epoch Cassette Vision",
    388: "Gear VR",
    96: "PDP-10",
    52: "Arcade",
    137: "New Nintendo 3DS",
    377: "Plug & Play",
    57: "WonderSwan",
    71: "Commodore VIC-20",
    75: "Apple II",
    74: "Windows Phone",
    80: "Neo Geo AES",
    84: "SG-1000",
    161: "Windows Mixed Reality",
    79: "Neo Geo MVS",
    33: "Game Boy",
    376: "Epoch Super Cassette Vision",
    5: "Wii",
    382: "Intellivision Amico",
    170: "Google Stadia",
    167: "PlayStation 5",
    387: "Oculus Go",
    385: "Oculus Rift",
    91: "Bally Astrocade",
    384: "Oculus Quest",
    69: "BBC Microcomputer System",
    55: "Legacy Mobile Device",
    379: "Game.com",
    3: "Linux",
    72: "Ouya",
    95: "PDP-1",
    151: "TRS-80 Color Computer",
    100: "Analogue electronics",
    166: "Pokémon mini",
    102: "EDSAC",
    104: "HP 2100",
    236: "Exidy Sorcerer",
    103: "PDP-7",
    238: "DVD Player",
    105: "HP 3000",
    106: "SDS Sigma 7",
    164: "Daydream",
    107: "Call-A-Computer time-shared mainframe computer system",
    240: "Zeebo",
    110: "PLATO",
    239: "Blu-ray Player",
    26: "ZX Spectrum",
    274: "PC-FX",
    27: "MSX",
    309: "Evercade",
    372: "OOParts",
    373: "Sinclair ZX81",
    203: "DUPLICATE Stadia",
    380: "Casio Loopy",
    169: "Xbox Series X|S",
    59: "Atari 2600",
    12: "Xbox 360",
    49: "Xbox One",
    7: "PlayStation",
    99: "Family Computer",
    389: "AirConsole",
    405: "Windows Mobile",
    409: "Legacy Computer",
    406: "Sinclair QL",
    411: "Handheld Electronic LCD",
    413: "Leapster Explorer/LeadPad Explorer",
    416: "Nintendo 64DD",
    407: "HyperScan",
    417: "Palm OS",
    408: "Mega Duck/Cougar Boy",
    410: "Atari Jaguar CD",
    415: "Watara/QuickShot Supervision",
    414: "LeapTV",
    412: "Leapster",
    438: "Arduboy",
    439: "V.Smile",
    440: "Visual Memory Unit / Visual Memory System",
    441: "PocketStation",
    29: "Sega Mega Drive/Genesis",
    386: "Meta Quest 2",
    390: "PlayStation VR2",
    165: "PlayStation VR",
    47: "Virtual Console",
}
