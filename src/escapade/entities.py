"""Named character entity tables for HTML escaping.

Three tiers, each an immutable mapping from code point to entity name (the
name excludes the leading ``&`` and trailing ``;``):

- MARKUP_SIGNIFICANT: the four characters that always need an entity
- ISO_LATIN_1: 0xA0-0xFF, from the HTML 4 Latin-1 entity set
- HTML4_EXTENDED: symbols, Greek letters and special characters above 0xFF
  from the HTML 4 symbol and special entity sets

The tables are built once at import time and never mutated, so any number
of threads may read them without locking.

Reference: https://www.w3.org/TR/html4/sgml/entities.html

Usage:
    from escapade.entities import lookup_entity

    name = lookup_entity(0xA3, latin1=True)  # "pound"
"""

from collections.abc import Mapping
from types import MappingProxyType

MARKUP_SIGNIFICANT: Mapping[int, str] = MappingProxyType(
    {
        0x22: "quot",  # double quote
        0x26: "amp",  # ampersand
        0x3C: "lt",  # less-than
        0x3E: "gt",  # greater-than
    }
)

ISO_LATIN_1: Mapping[int, str] = MappingProxyType(
    {
        0xA0: "nbsp",  # non-breaking space
        0xA1: "iexcl",  # inverted exclamation mark
        0xA2: "cent",  # cent sign
        0xA3: "pound",  # pound sign
        0xA4: "curren",  # currency sign
        0xA5: "yen",  # yen sign
        0xA6: "brvbar",  # broken vertical bar
        0xA7: "sect",  # section sign
        0xA8: "uml",  # spacing diaeresis
        0xA9: "copy",  # copyright sign
        0xAA: "ordf",  # feminine ordinal indicator
        0xAB: "laquo",  # left-pointing double angle quotation mark
        0xAC: "not",  # not sign
        0xAD: "shy",  # soft hyphen
        0xAE: "reg",  # registered trademark sign
        0xAF: "macr",  # macron
        0xB0: "deg",  # degree sign
        0xB1: "plusmn",  # plus-minus sign
        0xB2: "sup2",  # superscript two
        0xB3: "sup3",  # superscript three
        0xB4: "acute",  # acute accent
        0xB5: "micro",  # micro sign
        0xB6: "para",  # paragraph sign
        0xB7: "middot",  # middle dot
        0xB8: "cedil",  # cedilla
        0xB9: "sup1",  # superscript one
        0xBA: "ordm",  # masculine ordinal indicator
        0xBB: "raquo",  # right-pointing double angle quotation mark
        0xBC: "frac14",  # fraction one quarter
        0xBD: "frac12",  # fraction one half
        0xBE: "frac34",  # fraction three quarters
        0xBF: "iquest",  # inverted question mark
        0xC0: "Agrave",  # latin capital letter A with grave
        0xC1: "Aacute",  # latin capital letter A with acute
        0xC2: "Acirc",  # latin capital letter A with circumflex
        0xC3: "Atilde",  # latin capital letter A with tilde
        0xC4: "Auml",  # latin capital letter A with diaeresis
        0xC5: "Aring",  # latin capital letter A with ring above
        0xC6: "AElig",  # latin capital letter AE
        0xC7: "Ccedil",  # latin capital letter C with cedilla
        0xC8: "Egrave",  # latin capital letter E with grave
        0xC9: "Eacute",  # latin capital letter E with acute
        0xCA: "Ecirc",  # latin capital letter E with circumflex
        0xCB: "Euml",  # latin capital letter E with diaeresis
        0xCC: "Igrave",  # latin capital letter I with grave
        0xCD: "Iacute",  # latin capital letter I with acute
        0xCE: "Icirc",  # latin capital letter I with circumflex
        0xCF: "Iuml",  # latin capital letter I with diaeresis
        0xD0: "ETH",  # latin capital letter ETH
        0xD1: "Ntilde",  # latin capital letter N with tilde
        0xD2: "Ograve",  # latin capital letter O with grave
        0xD3: "Oacute",  # latin capital letter O with acute
        0xD4: "Ocirc",  # latin capital letter O with circumflex
        0xD5: "Otilde",  # latin capital letter O with tilde
        0xD6: "Ouml",  # latin capital letter O with diaeresis
        0xD7: "times",  # multiplication sign
        0xD8: "Oslash",  # latin capital letter O with stroke
        0xD9: "Ugrave",  # latin capital letter U with grave
        0xDA: "Uacute",  # latin capital letter U with acute
        0xDB: "Ucirc",  # latin capital letter U with circumflex
        0xDC: "Uuml",  # latin capital letter U with diaeresis
        0xDD: "Yacute",  # latin capital letter Y with acute
        0xDE: "THORN",  # latin capital letter THORN
        0xDF: "szlig",  # latin small letter sharp s
        0xE0: "agrave",  # latin small letter a with grave
        0xE1: "aacute",  # latin small letter a with acute
        0xE2: "acirc",  # latin small letter a with circumflex
        0xE3: "atilde",  # latin small letter a with tilde
        0xE4: "auml",  # latin small letter a with diaeresis
        0xE5: "aring",  # latin small letter a with ring above
        0xE6: "aelig",  # latin small letter ae
        0xE7: "ccedil",  # latin small letter c with cedilla
        0xE8: "egrave",  # latin small letter e with grave
        0xE9: "eacute",  # latin small letter e with acute
        0xEA: "ecirc",  # latin small letter e with circumflex
        0xEB: "euml",  # latin small letter e with diaeresis
        0xEC: "igrave",  # latin small letter i with grave
        0xED: "iacute",  # latin small letter i with acute
        0xEE: "icirc",  # latin small letter i with circumflex
        0xEF: "iuml",  # latin small letter i with diaeresis
        0xF0: "eth",  # latin small letter eth
        0xF1: "ntilde",  # latin small letter n with tilde
        0xF2: "ograve",  # latin small letter o with grave
        0xF3: "oacute",  # latin small letter o with acute
        0xF4: "ocirc",  # latin small letter o with circumflex
        0xF5: "otilde",  # latin small letter o with tilde
        0xF6: "ouml",  # latin small letter o with diaeresis
        0xF7: "divide",  # division sign
        0xF8: "oslash",  # latin small letter o with stroke
        0xF9: "ugrave",  # latin small letter u with grave
        0xFA: "uacute",  # latin small letter u with acute
        0xFB: "ucirc",  # latin small letter u with circumflex
        0xFC: "uuml",  # latin small letter u with diaeresis
        0xFD: "yacute",  # latin small letter y with acute
        0xFE: "thorn",  # latin small letter thorn
        0xFF: "yuml",  # latin small letter y with diaeresis
    }
)

HTML4_EXTENDED: Mapping[int, str] = MappingProxyType(
    {
        0x152: "OElig",  # latin capital ligature OE
        0x153: "oelig",  # latin small ligature oe
        0x160: "Scaron",  # latin capital letter S with caron
        0x161: "scaron",  # latin small letter s with caron
        0x178: "Yuml",  # latin capital letter Y with diaeresis
        0x192: "fnof",  # latin small f with hook
        0x2C6: "circ",  # modifier letter circumflex accent
        0x2DC: "tilde",  # small tilde
        0x391: "Alpha",  # greek capital letter alpha
        0x392: "Beta",  # greek capital letter beta
        0x393: "Gamma",  # greek capital letter gamma
        0x394: "Delta",  # greek capital letter delta
        0x395: "Epsilon",  # greek capital letter epsilon
        0x396: "Zeta",  # greek capital letter zeta
        0x397: "Eta",  # greek capital letter eta
        0x398: "Theta",  # greek capital letter theta
        0x399: "Iota",  # greek capital letter iota
        0x39A: "Kappa",  # greek capital letter kappa
        0x39B: "Lambda",  # greek capital letter lambda
        0x39C: "Mu",  # greek capital letter mu
        0x39D: "Nu",  # greek capital letter nu
        0x39E: "Xi",  # greek capital letter xi
        0x39F: "Omicron",  # greek capital letter omicron
        0x3A0: "Pi",  # greek capital letter pi
        0x3A1: "Rho",  # greek capital letter rho
        0x3A3: "Sigma",  # greek capital letter sigma
        0x3A4: "Tau",  # greek capital letter tau
        0x3A5: "Upsilon",  # greek capital letter upsilon
        0x3A6: "Phi",  # greek capital letter phi
        0x3A7: "Chi",  # greek capital letter chi
        0x3A8: "Psi",  # greek capital letter psi
        0x3A9: "Omega",  # greek capital letter omega
        0x3B1: "alpha",  # greek small letter alpha
        0x3B2: "beta",  # greek small letter beta
        0x3B3: "gamma",  # greek small letter gamma
        0x3B4: "delta",  # greek small letter delta
        0x3B5: "epsilon",  # greek small letter epsilon
        0x3B6: "zeta",  # greek small letter zeta
        0x3B7: "eta",  # greek small letter eta
        0x3B8: "theta",  # greek small letter theta
        0x3B9: "iota",  # greek small letter iota
        0x3BA: "kappa",  # greek small letter kappa
        0x3BB: "lambda",  # greek small letter lambda
        0x3BC: "mu",  # greek small letter mu
        0x3BD: "nu",  # greek small letter nu
        0x3BE: "xi",  # greek small letter xi
        0x3BF: "omicron",  # greek small letter omicron
        0x3C0: "pi",  # greek small letter pi
        0x3C1: "rho",  # greek small letter rho
        0x3C2: "sigmaf",  # greek small letter final sigma
        0x3C3: "sigma",  # greek small letter sigma
        0x3C4: "tau",  # greek small letter tau
        0x3C5: "upsilon",  # greek small letter upsilon
        0x3C6: "phi",  # greek small letter phi
        0x3C7: "chi",  # greek small letter chi
        0x3C8: "psi",  # greek small letter psi
        0x3C9: "omega",  # greek small letter omega
        0x3D1: "thetasym",  # greek small letter theta symbol
        0x3D2: "upsih",  # greek upsilon with hook symbol
        0x3D6: "piv",  # greek pi symbol
        0x2002: "ensp",  # en space
        0x2003: "emsp",  # em space
        0x2009: "thinsp",  # thin space
        0x200C: "zwnj",  # zero width non-joiner
        0x200D: "zwj",  # zero width joiner
        0x200E: "lrm",  # left-to-right mark
        0x200F: "rlm",  # right-to-left mark
        0x2013: "ndash",  # en dash
        0x2014: "mdash",  # em dash
        0x2018: "lsquo",  # left single quotation mark
        0x2019: "rsquo",  # right single quotation mark
        0x201A: "sbquo",  # single low-9 quotation mark
        0x201C: "ldquo",  # left double quotation mark
        0x201D: "rdquo",  # right double quotation mark
        0x201E: "bdquo",  # double low-9 quotation mark
        0x2020: "dagger",  # dagger
        0x2021: "Dagger",  # double dagger
        0x2022: "bull",  # bullet = black small circle
        0x2026: "hellip",  # horizontal ellipsis
        0x2030: "permil",  # per mille sign
        0x2032: "prime",  # prime
        0x2033: "Prime",  # double prime
        0x2039: "lsaquo",  # single left-pointing angle quotation mark
        0x203A: "rsaquo",  # single right-pointing angle quotation mark
        0x203E: "oline",  # overline
        0x2044: "frasl",  # fraction slash
        0x20AC: "euro",  # euro sign
        0x2111: "image",  # black letter capital I
        0x2118: "weierp",  # script capital P
        0x211C: "real",  # black letter capital R
        0x2122: "trade",  # trademark sign
        0x2135: "alefsym",  # alef symbol
        0x2190: "larr",  # leftwards arrow
        0x2191: "uarr",  # upwards arrow
        0x2192: "rarr",  # rightwards arrow
        0x2193: "darr",  # downwards arrow
        0x2194: "harr",  # left right arrow
        0x21B5: "crarr",  # downwards arrow with corner leftwards
        0x21D0: "lArr",  # leftwards double arrow
        0x21D1: "uArr",  # upwards double arrow
        0x21D2: "rArr",  # rightwards double arrow
        0x21D3: "dArr",  # downwards double arrow
        0x21D4: "hArr",  # left right double arrow
        0x2200: "forall",  # for all
        0x2202: "part",  # partial differential
        0x2203: "exist",  # there exists
        0x2205: "empty",  # empty set
        0x2207: "nabla",  # nabla
        0x2208: "isin",  # element of
        0x2209: "notin",  # not an element of
        0x220B: "ni",  # contains as member
        0x220F: "prod",  # n-ary product
        0x2211: "sum",  # n-ary summation
        0x2212: "minus",  # minus sign
        0x2217: "lowast",  # asterisk operator
        0x221A: "radic",  # square root
        0x221D: "prop",  # proportional to
        0x221E: "infin",  # infinity
        0x2220: "ang",  # angle
        0x2227: "and",  # logical and
        0x2228: "or",  # logical or
        0x2229: "cap",  # intersection
        0x222A: "cup",  # union
        0x222B: "int",  # integral
        0x2234: "there4",  # therefore
        0x223C: "sim",  # tilde operator
        0x2245: "cong",  # approximately equal to
        0x2248: "asymp",  # almost equal to
        0x2260: "ne",  # not equal to
        0x2261: "equiv",  # identical to
        0x2264: "le",  # less-than or equal to
        0x2265: "ge",  # greater-than or equal to
        0x2282: "sub",  # subset of
        0x2283: "sup",  # superset of
        0x2284: "nsub",  # not a subset of
        0x2286: "sube",  # subset of or equal to
        0x2287: "supe",  # superset of or equal to
        0x2295: "oplus",  # circled plus
        0x2297: "otimes",  # circled times
        0x22A5: "perp",  # up tack
        0x22C5: "sdot",  # dot operator
        0x2308: "lceil",  # left ceiling
        0x2309: "rceil",  # right ceiling
        0x230A: "lfloor",  # left floor
        0x230B: "rfloor",  # right floor
        0x2329: "lang",  # left-pointing angle bracket
        0x232A: "rang",  # right-pointing angle bracket
        0x25CA: "loz",  # lozenge
        0x2660: "spades",  # black spade suit
        0x2663: "clubs",  # black club suit
        0x2665: "hearts",  # black heart suit
        0x2666: "diams",  # black diamond suit
    }
)


def lookup_entity(cp: int, *, latin1: bool = False, extended: bool = False) -> str | None:
    """Find the entity name for cp in the enabled tiers.

    The markup-significant tier is always consulted first, then ISO Latin-1
    (if enabled), then the HTML 4 extended set (if enabled).

    Args:
        cp: Code point to look up
        latin1: Consult the ISO Latin-1 tier
        extended: Consult the HTML 4 extended tier

    Returns:
        Entity name, or None if no enabled tier defines one.

    Examples:
        >>> lookup_entity(0x26)
        'amp'
        >>> lookup_entity(0xA3) is None
        True
        >>> lookup_entity(0x3A0, extended=True)
        'Pi'
    """
    name = MARKUP_SIGNIFICANT.get(cp)
    if name is not None:
        return name
    if latin1:
        name = ISO_LATIN_1.get(cp)
        if name is not None:
            return name
    if extended:
        return HTML4_EXTENDED.get(cp)
    return None


__all__ = [
    "HTML4_EXTENDED",
    "ISO_LATIN_1",
    "MARKUP_SIGNIFICANT",
    "lookup_entity",
]
