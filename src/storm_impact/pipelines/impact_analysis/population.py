"""Census 2000 resident population by state (Summary File 1).

Used only as the per-capita divisor for the state damage maps.
Territories (PR, VI, GU, AS, MP) are deliberately absent, so their
events never reach the per-capita output.
"""

STATE_POPULATION: dict[str, int] = {
    "AL": 4_447_100,
    "AK": 626_932,
    "AZ": 5_130_632,
    "AR": 2_673_400,
    "CA": 33_871_648,
    "CO": 4_301_261,
    "CT": 3_405_565,
    "DE": 783_600,
    "FL": 15_982_378,
    "GA": 8_186_453,
    "HI": 1_211_537,
    "ID": 1_293_953,
    "IL": 12_419_293,
    "IN": 6_080_485,
    "IA": 2_926_324,
    "KS": 2_688_418,
    "KY": 4_041_769,
    "LA": 4_468_976,
    "ME": 1_274_923,
    "MD": 5_296_486,
    "MA": 6_349_097,
    "MI": 9_938_444,
    "MN": 4_919_479,
    "MS": 2_844_658,
    "MO": 5_595_211,
    "MT": 902_195,
    "NE": 1_711_263,
    "NV": 1_998_257,
    "NH": 1_235_786,
    "NJ": 8_414_350,
    "NM": 1_819_046,
    "NY": 18_976_457,
    "NC": 8_049_313,
    "ND": 642_200,
    "OH": 11_353_140,
    "OK": 3_450_654,
    "OR": 3_421_399,
    "PA": 12_281_054,
    "RI": 1_048_319,
    "SC": 4_012_012,
    "SD": 754_844,
    "TN": 5_689_283,
    "TX": 20_851_820,
    "UT": 2_233_169,
    "VT": 608_827,
    "VA": 7_078_515,
    "WA": 5_894_121,
    "WV": 1_808_344,
    "WI": 5_363_675,
    "WY": 493_782,
    "DC": 572_059,
}
