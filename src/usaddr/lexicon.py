"""Directional and street-suffix lexicons for U.S. addresses."""

from types import MappingProxyType

from usaddr.exceptions import InitializationError


def _expand(groups: dict[str, tuple[str, ...]]) -> dict[str, str]:
    """Flatten ``{abbreviation: (variants...)}`` into ``{variant: abbreviation}``."""
    table = {}
    for abbreviation, variants in groups.items():
        table[abbreviation] = abbreviation
        for variant in variants:
            table[variant] = abbreviation
    return table


class AddressLexicon:
    """
    Static lookup tables of U.S. address vocabulary.

    Keys are lower-case spellings found in addresses, values are the USPS
    standard abbreviation. The pipeline only tests membership; the tables
    are read-only after import.
    """

    # Compass directions
    DIRECTIONALS = MappingProxyType(_expand({
        "n": ("north",),
        "s": ("south",),
        "e": ("east",),
        "w": ("west",),
        "ne": ("northeast",),
        "nw": ("northwest",),
        "se": ("southeast",),
        "sw": ("southwest",),
    }))

    # USPS street suffixes (Publication 28, Appendix C1)
    STREET_NAMES = MappingProxyType(_expand({
        "aly": ("allee", "alley", "ally"),
        "anx": ("anex", "annex", "annx"),
        "arc": ("arcade",),
        "ave": ("av", "aven", "avenu", "avenue", "avn", "avnue"),
        "byu": ("bayoo", "bayou"),
        "bch": ("beach",),
        "bnd": ("bend",),
        "blf": ("bluf", "bluff"),
        "blfs": ("bluffs",),
        "btm": ("bot", "bottm", "bottom"),
        "blvd": ("boul", "boulevard", "boulv"),
        "br": ("brnch", "branch"),
        "brg": ("brdge", "bridge"),
        "brk": ("brook",),
        "brks": ("brooks",),
        "bg": ("burg",),
        "bgs": ("burgs",),
        "byp": ("bypa", "bypas", "bypass", "byps"),
        "cp": ("camp", "cmp"),
        "cyn": ("canyn", "canyon", "cnyn"),
        "cpe": ("cape",),
        "cswy": ("causeway", "causwa"),
        "ctr": ("cen", "cent", "center", "centr", "centre", "cnter", "cntr"),
        "ctrs": ("centers",),
        "cir": ("circ", "circl", "circle", "crcl", "crcle"),
        "cirs": ("circles",),
        "clf": ("cliff",),
        "clfs": ("cliffs",),
        "clb": ("club",),
        "cmn": ("common",),
        "cmns": ("commons",),
        "cor": ("corner",),
        "cors": ("corners",),
        "crse": ("course",),
        "ct": ("court",),
        "cts": ("courts",),
        "cv": ("cove",),
        "cvs": ("coves",),
        "crk": ("creek",),
        "cres": ("crescent", "crsent", "crsnt"),
        "crst": ("crest",),
        "xing": ("crossing", "crssng"),
        "xrd": ("crossroad",),
        "xrds": ("crossroads",),
        "curv": ("curve",),
        "dl": ("dale",),
        "dm": ("dam",),
        "dv": ("div", "divide", "dvd"),
        "dr": ("driv", "drive", "drv"),
        "drs": ("drives",),
        "est": ("estate",),
        "ests": ("estates",),
        "expy": ("exp", "expr", "express", "expressway", "expw"),
        "ext": ("extension", "extn", "extnsn"),
        "exts": ("extensions",),
        "fall": (),
        "fls": ("falls",),
        "fry": ("ferry", "frry"),
        "fld": ("field",),
        "flds": ("fields",),
        "flt": ("flat",),
        "flts": ("flats",),
        "frd": ("ford",),
        "frds": ("fords",),
        "frst": ("forest", "forests"),
        "frg": ("forg", "forge"),
        "frgs": ("forges",),
        "frk": ("fork",),
        "frks": ("forks",),
        "ft": ("fort", "frt"),
        "fwy": ("freeway", "freewy", "frway", "frwy"),
        "gdn": ("garden", "gardn", "grden", "grdn"),
        "gdns": ("gardens", "grdns"),
        "gtwy": ("gateway", "gatewy", "gatway", "gtway"),
        "gln": ("glen",),
        "glns": ("glens",),
        "grn": ("green",),
        "grns": ("greens",),
        "grv": ("grov", "grove"),
        "grvs": ("groves",),
        "hbr": ("harb", "harbor", "harbr", "hrbor"),
        "hbrs": ("harbors",),
        "hvn": ("haven",),
        "hts": ("ht", "heights"),
        "hwy": ("highway", "highwy", "hiway", "hiwy", "hway"),
        "hl": ("hill",),
        "hls": ("hills",),
        "holw": ("hllw", "hollow", "hollows", "holws"),
        "inlt": ("inlet",),
        "is": ("island", "islnd"),
        "iss": ("islands", "islnds"),
        "isle": ("isles",),
        "jct": ("jction", "jctn", "junction", "junctn", "juncton"),
        "jcts": ("jctns", "junctions"),
        "ky": ("key",),
        "kys": ("keys",),
        "knl": ("knol", "knoll"),
        "knls": ("knolls",),
        "lk": ("lake",),
        "lks": ("lakes",),
        "land": (),
        "lndg": ("landing", "lndng"),
        "ln": ("lane",),
        "lgt": ("light",),
        "lgts": ("lights",),
        "lf": ("loaf",),
        "lck": ("lock",),
        "lcks": ("locks",),
        "ldg": ("ldge", "lodg", "lodge"),
        "loop": ("loops",),
        "mall": (),
        "mnr": ("manor",),
        "mnrs": ("manors",),
        "mdw": ("meadow",),
        "mdws": ("meadows", "medows"),
        "mews": (),
        "ml": ("mill",),
        "mls": ("mills",),
        "msn": ("missn", "mssn"),
        "mtwy": ("motorway",),
        "mt": ("mnt", "mount"),
        "mtn": ("mntain", "mntn", "mountain", "mountin", "mtin"),
        "mtns": ("mntns", "mountains"),
        "nck": ("neck",),
        "orch": ("orchard", "orchrd"),
        "oval": ("ovl",),
        "opas": ("overpass",),
        "park": ("prk", "parks"),
        "pkwy": ("parkway", "parkwy", "pkway", "pky", "parkways", "pkwys"),
        "pass": (),
        "psge": ("passage",),
        "path": ("paths",),
        "pike": ("pikes",),
        "pne": ("pine",),
        "pnes": ("pines",),
        "pl": ("place",),
        "pln": ("plain",),
        "plns": ("plains",),
        "plz": ("plaza", "plza"),
        "pt": ("point",),
        "pts": ("points",),
        "prt": ("port",),
        "prts": ("ports",),
        "pr": ("prairie", "prr"),
        "radl": ("rad", "radial", "radiel"),
        "ramp": (),
        "rnch": ("ranch", "ranches", "rnchs"),
        "rpd": ("rapid",),
        "rpds": ("rapids",),
        "rst": ("rest",),
        "rdg": ("rdge", "ridge"),
        "rdgs": ("ridges",),
        "riv": ("river", "rvr", "rivr"),
        "rd": ("road",),
        "rds": ("roads",),
        "rte": ("route",),
        "row": (),
        "rue": (),
        "run": (),
        "shl": ("shoal",),
        "shls": ("shoals",),
        "shr": ("shoar", "shore"),
        "shrs": ("shoars", "shores"),
        "skwy": ("skyway",),
        "spg": ("spng", "spring", "sprng"),
        "spgs": ("spngs", "springs", "sprngs"),
        "spur": ("spurs",),
        "sq": ("sqr", "sqre", "squ", "square"),
        "sqs": ("sqrs", "squares"),
        "sta": ("station", "statn", "stn"),
        "stra": ("strav", "straven", "stravenue", "stravn", "strvn", "strvnue"),
        "strm": ("stream", "streme"),
        "st": ("street", "strt", "str"),
        "sts": ("streets",),
        "smt": ("sumit", "sumitt", "summit"),
        "ter": ("terr", "terrace"),
        "trwy": ("throughway",),
        "trce": ("trace", "traces"),
        "trak": ("track", "tracks", "trk", "trks"),
        "trfy": ("trafficway",),
        "trl": ("trail", "trails", "trls"),
        "trlr": ("trailer", "trlrs"),
        "tunl": ("tunel", "tunls", "tunnel", "tunnels", "tunnl"),
        "tpke": ("trnpk", "turnpike", "turnpk"),
        "upas": ("underpass",),
        "un": ("union",),
        "uns": ("unions",),
        "vly": ("valley", "vally", "vlly"),
        "vlys": ("valleys",),
        "via": ("vdct", "viadct", "viaduct"),
        "vw": ("view",),
        "vws": ("views",),
        "vlg": ("vill", "villag", "village", "villg", "villiage"),
        "vlgs": ("villages",),
        "vl": ("ville",),
        "vis": ("vist", "vista", "vst", "vsta"),
        "walk": ("walks",),
        "wall": (),
        "way": ("wy",),
        "ways": (),
        "wl": ("well",),
        "wls": ("wells",),
    }))

    def __init__(self, directionals=None, street_names=None):
        """
        Initialize lexicon.

        Args:
            directionals: Override table for directional abbreviations
            street_names: Override table for street-suffix abbreviations
        """
        self.directionals = self.DIRECTIONALS if directionals is None else directionals
        self.street_names = self.STREET_NAMES if street_names is None else street_names

        if not self.directionals or not self.street_names:
            raise InitializationError("Lexicon data is missing: both lookup tables must be non-empty")

    def is_directional(self, token: str) -> bool:
        """Check if the lower-cased token is a directional."""
        return token.lower() in self.directionals

    def is_street_name(self, token: str) -> bool:
        """Check if the lower-cased token is a street suffix."""
        return token.lower() in self.street_names
