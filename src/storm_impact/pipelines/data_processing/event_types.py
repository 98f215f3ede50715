"""Raw EVTYPE label → canonical event category lookup.

The storm-event extract carries several hundred free-text event labels:
typos ("ligntning"), plural forms ("rip currents"), gust annotations
("tstm wind (g45)"), stray whitespace ("   high surf advisory") and
date-stamped "summary" placeholders.  Each is mapped here, by exact match
on the lower-cased label, to one of the categories of NOAA Storm Data
Directive 10-1605 (Table 2.1.1), with a few merges (e.g. all flooding →
"flood") and a catch-all "other" for labels that cannot be placed.

Corrections belong in this table, not in the normalizer code.
"""

from __future__ import annotations

CATCH_ALL_EVENT_TYPE: str = "other"

# ── Canonical names map to themselves ───────────────────────────────
_CANONICAL_NAMES: tuple[str, ...] = (
    "astronomical tide",
    "avalanche",
    "blizzard",
    "cold/wind chill",
    "dense fog",
    "dense smoke",
    "drought",
    "dust devil",
    "dust storm",
    "excessive heat",
    "extreme cold/wind chill",
    "flood",
    "freezing fog",
    "frost/freeze",
    "funnel cloud",
    "hail",
    "heat",
    "heavy rain",
    "heavy snow",
    "heavy wind",
    "high surf",
    "high wind",
    "hurricane/typhoon",
    "ice",
    "ice storm",
    "lake-effect snow",
    "lightning",
    "marine high wind",
    "other",
    "rip current",
    "seiche",
    "sleet",
    "storm surge/tide",
    "thunderstorm wind",
    "tornado",
    "tropical storm",
    "tsunami",
    "volcanic ash",
    "waterspout",
    "wildfire",
    "winter storm",
    "winter weather",
)

# ── Official NOAA names folded into a broader category ─────────────
_FOLDED_OFFICIAL_NAMES: dict[str, str] = {
    "debris flow": "other",
    "extreme heat": "excessive heat",
    "hurricane (typhoon)": "hurricane/typhoon",
    "marine hail": "hail",
    "marine strong wind": "marine high wind",
    "marine thunderstorm wind": "thunderstorm wind",
    "marine tstm wind": "thunderstorm wind",
    "sneakerwave": "high surf",
    "tropical depression": "tropical storm",
    "avalance": "avalanche",
    "small hail": "hail",
    "thunderstorm winds": "thunderstorm wind",
}

# ── Variant labels observed in the extract (lower-cased, verbatim) ──
_OBSERVED_ALIASES: dict[str, str] = {
    "   high surf advisory": "high surf",
    " coastal flood": "flood",
    " flash flood": "flood",
    " lightning": "other",
    " tstm wind": "thunderstorm wind",
    " tstm wind (g45)": "thunderstorm wind",
    " waterspout": "other",
    " wind": "other",
    "abnormal warmth": "heat",
    "abnormally dry": "drought",
    "abnormally wet": "other",
    "accumulated snowfall": "winter weather",
    "agricultural freeze": "winter weather",
    "astronomical high tide": "astronomical tide",
    "astronomical low tide": "astronomical tide",
    "beach erosion": "other",
    "bitter wind chill": "extreme cold/wind chill",
    "bitter wind chill temperatures": "extreme cold/wind chill",
    "black ice": "ice",
    "blizzard summary": "blizzard",
    "blow-out tide": "astronomical tide",
    "blow-out tides": "astronomical tide",
    "blowing dust": "dust storm",
    "blowing snow": "winter weather",
    "brush fire": "wildfire",
    "coastal  flooding/erosion": "flood",
    "coastal erosion": "other",
    "coastal flood": "flood",
    "coastal flooding": "flood",
    "coastal flooding/erosion": "flood",
    "coastal storm": "heavy rain",
    "coastalflood": "flood",
    "coastalstorm": "heavy rain",
    "cold": "extreme cold/wind chill",
    "cold and frost": "frost/freeze",
    "cold and snow": "winter weather",
    "cold temperature": "extreme cold/wind chill",
    "cold temperatures": "extreme cold/wind chill",
    "cold weather": "winter weather",
    "cold wind chill temperatures": "extreme cold/wind chill",
    "cold/wind chill": "extreme cold/wind chill",
    "cool spell": "extreme cold/wind chill",
    "cstl flooding/erosion": "flood",
    "dam break": "flood",
    "damaging freeze": "frost/freeze",
    "downburst": "heavy wind",
    "driest month": "drought",
    "drifting snow": "winter weather",
    "drowning": "other",
    "dry": "drought",
    "dry conditions": "drought",
    "dry microburst": "high wind",
    "dry spell": "drought",
    "dry weather": "drought",
    "dryness": "drought",
    "dust devel": "dust devil",
    "early frost": "frost/freeze",
    "early rain": "other",
    "early snowfall": "winter weather",
    "erosion/cstl flood": "flood",
    "excessive cold": "extreme cold/wind chill",
    "excessive rain": "heavy rain",
    "excessive rainfall": "heavy rain",
    "excessive snow": "heavy snow",
    "excessively dry": "drought",
    "extended cold": "extreme cold/wind chill",
    "extreme cold": "extreme cold/wind chill",
    "extreme wind chill": "extreme cold/wind chill",
    "extreme windchill": "extreme cold/wind chill",
    "extreme windchill temperatures": "extreme cold/wind chill",
    "extremely wet": "other",
    "falling snow/ice": "winter weather",
    "first frost": "frost/freeze",
    "first snow": "winter weather",
    "flash flood": "flood",
    "flash flood/flood": "flood",
    "flash flooding": "flood",
    "flood/flash flood": "flood",
    "flood/flash/flood": "flood",
    "flood/strong wind": "flood",
    "fog": "dense fog",
    "freeze": "frost/freeze",
    "freezing drizzle": "sleet",
    "freezing rain": "sleet",
    "freezing rain/sleet": "sleet",
    "freezing spray": "sleet",
    "frost": "frost/freeze",
    "funnel clouds": "funnel cloud",
    "glaze": "other",
    "gradient wind": "heavy wind",
    "gusty lake wind": "heavy wind",
    "gusty thunderstorm wind": "thunderstorm wind",
    "gusty thunderstorm winds": "thunderstorm wind",
    "gusty wind": "heavy wind",
    "gusty winds": "heavy wind",
    "hail(0.75)": "hail",
    "hard freeze": "frost/freeze",
    "hazardous surf": "high surf",
    "heat": "heat",
    "heat wave": "heat",
    "heatburst": "heat",
    "heavy precipitation": "heavy rain",
    "heavy rain effects": "heavy rain",
    "heavy rainfall": "heavy rain",
    "heavy seas": "high surf",
    "heavy snow shower": "heavy snow",
    "heavy snow squalls": "heavy snow",
    "heavy surf": "high surf",
    "heavy surf/high surf": "high surf",
    "high  swells": "high surf",
    "high seas": "high surf",
    "high surf advisories": "high surf",
    "high surf advisory": "high surf",
    "high swells": "high surf",
    "high water": "flood",
    "high waves": "high surf",
    "high wind (g40)": "high wind",
    "high wind and seas": "high wind",
    "high wind damage": "high wind",
    "high winds": "high wind",
    "high winds heavy rains": "high wind",
    "hurricane": "hurricane/typhoon",
    "hurricane edouard": "hurricane/typhoon",
    "hurricane emily": "hurricane/typhoon",
    "hurricane erin": "hurricane/typhoon",
    "hurricane felix": "hurricane/typhoon",
    "hurricane opal": "hurricane/typhoon",
    "hurricane opal/high winds": "hurricane/typhoon",
    "hyperthermia/exposure": "heat",
    "hypothermia": "extreme cold/wind chill",
    "hypothermia/exposure": "extreme cold/wind chill",
    "ice": "ice",
    "ice floes": "ice",
    "ice fog": "freezing fog",
    "ice jam flood (minor": "flood",
    "ice on road": "ice",
    "ice roads": "ice",
    "ice storm/flash flood": "ice storm",
    "icy roads": "ice",
    "lack of snow": "other",
    "lake effect snow": "lake-effect snow",
    "lake flood": "flood",
    "lakeshore flood": "flood",
    "landslide": "other",
    "landslides": "other",
    "landslump": "other",
    "large wall cloud": "other",
    "late freeze": "frost/freeze",
    "late season snow": "winter weather",
    "late snow": "winter weather",
    "light freezing rain": "sleet",
    "light snow": "winter weather",
    "light snowfall": "winter weather",
    "lighting": "lightning",
    "ligntning": "lightning",
    "low temperature": "extreme cold/wind chill",
    "low temperature record": "extreme cold/wind chill",
    "major flood": "flood",
    "marine accident": "other",
    "marine mishap": "other",
    "metro storm, may 26": "other",
    "microburst": "thunderstorm wind",
    "microburst winds": "thunderstorm wind",
    "mild and dry pattern": "other",
    "mild pattern": "other",
    "mild/dry pattern": "other",
    "minor flooding": "flood",
    "mixed precip": "winter weather",
    "mixed precipitation": "winter weather",
    "monthly precipitation": "other",
    "monthly rainfall": "other",
    "monthly snowfall": "other",
    "monthly temperature": "other",
    "mountain snows": "heavy snow",
    "mud slide": "other",
    "mud slides": "other",
    "mud slides urban flooding": "other",
    "mudslide": "other",
    "mudslides": "other",
    "near record snow": "heavy snow",
    "no severe weather": "other",
    "non severe hail": "hail",
    "non-severe wind damage": "heavy wind",
    "non-tstm wind": "heavy wind",
    "none": "other",
    "northern lights": "other",
    "other": "other",
    "patchy dense fog": "dense fog",
    "patchy ice": "ice",
    "prolong cold": "extreme cold/wind chill",
    "prolong cold/snow": "winter weather",
    "prolong warmth": "heat",
    "prolonged rain": "heavy rain",
    "rain": "heavy rain",
    "rain (heavy)": "heavy rain",
    "rain and wind": "heavy rain",
    "rain damage": "heavy rain",
    "rain/snow": "winter weather",
    "rain/wind": "heavy rain",
    "rainstorm": "heavy rain",
    "rapidly rising water": "flood",
    "record cold": "extreme cold/wind chill",
    "record cold and high wind": "extreme cold/wind chill",
    "record cool": "extreme cold/wind chill",
    "record dry month": "drought",
    "record dryness": "drought",
    "record heat": "heat",
    "record heat wave": "heat",
    "record high": "heat",
    "record high temperature": "heat",
    "record high temperatures": "heat",
    "record low": "extreme cold/wind chill",
    "record low rainfall": "drought",
    "record may snow": "heavy snow",
    "record precipitation": "heavy rain",
    "record rainfall": "heavy rain",
    "record snow": "heavy snow",
    "record snow/cold": "winter weather",
    "record snowfall": "heavy snow",
    "record temperature": "other",
    "record temperatures": "other",
    "record warm": "heat",
    "record warm temps.": "heat",
    "record warmth": "heat",
    "record winter snow": "heavy snow",
    "red flag criteria": "other",
    "remnants of floyd": "other",
    "rip current": "rip current",
    "rip currents": "rip current",
    "rip currents heavy surf": "rip current",
    "river and stream flood": "flood",
    "river flood": "flood",
    "river flooding": "flood",
    "rock slide": "other",
    "rogue wave": "high surf",
    "rough seas": "high surf",
    "rough surf": "high surf",
    "rural flood": "flood",
    "saharan dust": "other",
    "seasonal snowfall": "winter weather",
    "severe cold": "extreme cold/wind chill",
    "severe thunderstorm": "thunderstorm wind",
    "severe thunderstorm winds": "thunderstorm wind",
    "severe thunderstorms": "thunderstorm wind",
    "severe turbulence": "other",
    "sleet storm": "sleet",
    "sleet/ice storm": "sleet",
    "small stream flood": "flood",
    "sml stream fld": "flood",
    "smoke": "dense smoke",
    "snow": "heavy snow",
    "snow accumulation": "heavy snow",
    "snow advisory": "winter weather",
    "snow and cold": "winter weather",
    "snow and heavy snow": "heavy snow",
    "snow and ice": "winter weather",
    "snow and ice storm": "winter weather",
    "snow and sleet": "sleet",
    "snow and wind": "winter weather",
    "snow drought": "drought",
    "snow freezing rain": "sleet",
    "snow showers": "winter weather",
    "snow sleet": "sleet",
    "snow squall": "heavy snow",
    "snow squalls": "heavy snow",
    "snow/ bitter cold": "winter weather",
    "snow/ ice": "winter weather",
    "snow/blowing snow": "heavy snow",
    "snow/cold": "winter weather",
    "snow/freezing rain": "sleet",
    "snow/heavy snow": "heavy snow",
    "snow/high winds": "winter weather",
    "snow/ice": "winter weather",
    "snow/ice storm": "winter weather",
    "snow/rain": "winter weather",
    "snow/rain/sleet": "sleet",
    "snow/sleet": "sleet",
    "snow/sleet/freezing rain": "sleet",
    "snow/sleet/rain": "sleet",
    "snow\\cold": "winter weather",
    "snowfall record": "heavy snow",
    "snowmelt flooding": "flood",
    "snowstorm": "winter storm",
    "southeast": "other",
    "storm force winds": "heavy wind",
    "storm surge": "storm surge/tide",
    "stream flooding": "flood",
    "street flood": "flood",
    "street flooding": "flood",
    "strong wind": "heavy wind",
    "strong wind gust": "heavy wind",
    "strong winds": "heavy wind",
    "summary august 10": "other",
    "summary august 11": "other",
    "summary august 17": "other",
    "summary august 2-3": "other",
    "summary august 21": "other",
    "summary august 28": "other",
    "summary august 4": "other",
    "summary august 7": "other",
    "summary august 9": "other",
    "summary jan 17": "other",
    "summary july 23-24": "other",
    "summary june 18-19": "other",
    "summary june 5-6": "other",
    "summary june 6": "other",
    "summary of april 12": "other",
    "summary of april 13": "other",
    "summary of april 21": "other",
    "summary of april 27": "other",
    "summary of april 3rd": "other",
    "summary of august 1": "other",
    "summary of july 11": "other",
    "summary of july 2": "other",
    "summary of july 22": "other",
    "summary of july 26": "other",
    "summary of july 29": "other",
    "summary of july 3": "other",
    "summary of june 13": "other",
    "summary of june 15": "other",
    "summary of june 16": "other",
    "summary of june 18": "other",
    "summary of june 23": "other",
    "summary of june 24": "other",
    "summary of june 3": "other",
    "summary of june 30": "other",
    "summary of june 4": "other",
    "summary of june 6": "other",
    "summary of march 14": "other",
    "summary of march 23": "other",
    "summary of march 24": "other",
    "summary of march 24-25": "other",
    "summary of march 27": "other",
    "summary of march 29": "other",
    "summary of may 10": "other",
    "summary of may 13": "other",
    "summary of may 14": "other",
    "summary of may 22": "other",
    "summary of may 22 am": "other",
    "summary of may 22 pm": "other",
    "summary of may 26 am": "other",
    "summary of may 26 pm": "other",
    "summary of may 31 am": "other",
    "summary of may 31 pm": "other",
    "summary of may 9-10": "other",
    "summary sept. 25-26": "other",
    "summary september 20": "other",
    "summary september 23": "other",
    "summary september 3": "other",
    "summary september 4": "other",
    "summary: nov. 16": "other",
    "summary: nov. 6-7": "other",
    "summary: oct. 20-21": "other",
    "summary: october 31": "other",
    "summary: sept. 18": "other",
    "temperature record": "other",
    "thundersnow shower": "winter weather",
    "thunderstorm": "heavy rain",
    "thunderstorm wind (g40)": "thunderstorm wind",
    "thunderstorms": "heavy rain",
    "tidal flooding": "flood",
    "tornado debris": "tornado",
    "torrential rainfall": "heavy rain",
    "tstm": "thunderstorm wind",
    "tstm heavy rain": "thunderstorm wind",
    "tstm wind": "thunderstorm wind",
    "tstm wind  (g45)": "thunderstorm wind",
    "tstm wind (41)": "thunderstorm wind",
    "tstm wind (g35)": "thunderstorm wind",
    "tstm wind (g40)": "thunderstorm wind",
    "tstm wind (g45)": "thunderstorm wind",
    "tstm wind 40": "thunderstorm wind",
    "tstm wind 45": "thunderstorm wind",
    "tstm wind and lightning": "thunderstorm wind",
    "tstm wind g45": "thunderstorm wind",
    "tstm wind/hail": "thunderstorm wind",
    "tstm winds": "thunderstorm wind",
    "tstm wnd": "thunderstorm wind",
    "typhoon": "hurricane/typhoon",
    "unseasonable cold": "cold/wind chill",
    "unseasonably cold": "cold/wind chill",
    "unseasonably cool": "cold/wind chill",
    "unseasonably cool & wet": "cold/wind chill",
    "unseasonably dry": "drought",
    "unseasonably hot": "heat",
    "unseasonably warm": "heat",
    "unseasonably warm & wet": "heat",
    "unseasonably warm and dry": "heat",
    "unseasonably warm year": "heat",
    "unseasonably warm/wet": "heat",
    "unseasonably wet": "other",
    "unseasonal low temp": "cold/wind chill",
    "unseasonal rain": "other",
    "unusual warmth": "heat",
    "unusual/record warmth": "heat",
    "unusually cold": "cold/wind chill",
    "unusually late snow": "winter weather",
    "unusually warm": "heat",
    "urban flood": "flood",
    "urban flooding": "flood",
    "urban/small strm fldg": "flood",
    "urban/sml stream fld": "flood",
    "urban/sml stream fldg": "flood",
    "urban/street flooding": "flood",
    "very dry": "drought",
    "very warm": "heat",
    "vog": "other",
    "volcanic ash plume": "volcanic ash",
    "volcanic ashfall": "volcanic ash",
    "volcanic eruption": "volcanic ash",
    "wake low wind": "other",
    "wall cloud": "other",
    "warm weather": "heat",
    "waterspouts": "waterspout",
    "wet micoburst": "heat",
    "wet microburst": "heat",
    "wet month": "other",
    "wet year": "other",
    "whirlwind": "other",
    "wild/forest fire": "wildfire",
    "wind": "heavy wind",
    "wind advisory": "heavy wind",
    "wind and wave": "marine high wind",
    "wind chill": "cold/wind chill",
    "wind damage": "heavy wind",
    "wind gusts": "heavy wind",
    "winds": "heavy wind",
    "winter mix": "winter weather",
    "winter weather mix": "winter weather",
    "winter weather/mix": "winter weather",
    "wintery mix": "winter weather",
    "wintry mix": "winter weather",
    "wnd": "heavy wind",
}

# Observed aliases are applied last: the raw label "cold/wind chill" is
# merged into "extreme cold/wind chill" even though the narrower category
# still exists for the "unseasonably cold" family.
EVENT_TYPE_MAP: dict[str, str] = {
    **{name: name for name in _CANONICAL_NAMES},
    **_FOLDED_OFFICIAL_NAMES,
    **_OBSERVED_ALIASES,
}

CANONICAL_EVENT_TYPES: frozenset[str] = frozenset(EVENT_TYPE_MAP.values())
