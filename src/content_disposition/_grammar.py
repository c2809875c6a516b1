"""Regular expressions for the Content-Disposition grammar.

These are derived from the collected ABNF in RFC 6266 (section 4.1), the
token and quoted-string rules of RFC 2616 (section 2.2) and the ext-value
rule of RFC 5987 (section 3.2.1). Fragments are composed into the compiled
patterns at the bottom of the module; every compiled pattern is anchored by
the caller with ``match``/``fullmatch`` and never carries state between calls.
"""

from __future__ import annotations

import re

#  LWS           = [CRLF] 1*( SP | HT )
#                ; folding is obsolete, only SP and HT are accepted

LWS = r"[\t ]*"

#  token         = 1*<any CHAR except CTLs or separators>
#  separators    = "(" | ")" | "<" | ">" | "@"
#                | "," | ";" | ":" | "\" | <">
#                | "/" | "[" | "]" | "?" | "="
#                | "{" | "}" | SP | HT

TOKEN = r"[!#$%&'*+.0-9A-Z^_`a-z|~-]+"

#  quoted-string = ( <"> *(qdtext | quoted-pair ) <"> )
#  qdtext        = <any TEXT except <">>
#  quoted-pair   = "\" CHAR
#  CHAR          = <any US-ASCII character (octets 0 - 127)>

QDTEXT = r"[\x20!\x23-\x5b\x5d-\x7e\x80-\xff]"
QUOTED_PAIR = r"\\[\x00-\x7f]"
QUOTED_STRING = rf'"(?:{QDTEXT}|{QUOTED_PAIR})*"'

#  pct-encoded   = "%" HEXDIG HEXDIG

PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

#  attr-char     = ALPHA / DIGIT
#                / "!" / "#" / "$" / "&" / "+" / "-" / "."
#                / "^" / "_" / "`" / "|" / "~"
#                ; token except ( "*" / "'" / "%" )

ATTR_CHAR = r"[A-Za-z0-9!#$&+.^_`|~-]"

#  mime-charset  = 1*mime-charsetc
#  mime-charsetc = ALPHA / DIGIT
#                / "!" / "#" / "$" / "%" / "&"
#                / "+" / "-" / "^" / "_" / "`"
#                / "{" / "}" / "~"

MIME_CHARSET = r"[A-Za-z0-9!#$%&+\-^_`{}~]+"

#  language      = ( 2*3ALPHA [ extlang ] )
#                / 4ALPHA
#                / 5*8ALPHA
#  extlang       = *3( "-" 3ALPHA )

LANGUAGE = r"[A-Za-z]{2,3}(?:-[A-Za-z]{3}){0,3}|[A-Za-z]{4,8}"

#  ext-value     = charset  "'" [ language ] "'" value-chars
#  value-chars   = 1*( pct-encoded / attr-char )

EXT_VALUE = rf"({MIME_CHARSET})'(?:{LANGUAGE})?'((?:{PCT_ENCODED}|{ATTR_CHAR})+)"

#  disposition-type = "inline" | "attachment" | disp-ext-type
#  disp-ext-type    = token

DISPOSITION_TYPE_RE = re.compile(rf"({TOKEN}){LWS}(?:\Z|;)")

#  disposition-parm = ";" LWS param-name LWS "=" LWS param-value LWS
#  param-value      = token | quoted-string
#                   ; an ext-value is always a valid token

PARAM_RE = re.compile(rf";{LWS}({TOKEN}){LWS}={LWS}({QUOTED_STRING}|{TOKEN}){LWS}")

TOKEN_RE = re.compile(TOKEN)
EXT_VALUE_RE = re.compile(EXT_VALUE)

# Text that can be sent as a quoted-string without an extended value.
TEXT_RE = re.compile(r"[\x20-\x7e\xa0-\xff]+")
NON_LATIN1_RE = re.compile(r"[^\x20-\x7e\xa0-\xff]")

HEX_ESCAPE_RE = re.compile(PCT_ENCODED)
QUOTED_PAIR_RE = re.compile(r"\\([\x00-\x7f])")
QUOTE_RE = re.compile(r'([\\"])')

# Characters left raw by a URI component escaper that attr-char still forbids.
ATTR_CHAR_ESCAPE_RE = re.compile(r"""[\x00-\x20"'()*,/:;<=>?@\[\\\]{}\x7f]""")


def is_token(value: str) -> bool:
    return TOKEN_RE.fullmatch(value) is not None


def is_quotable(value: str) -> bool:
    """Return ``True`` if *value* can be sent as a plain quoted-string.

    Only visible ASCII and the printable ISO-8859-1 range qualify; anything
    else needs an RFC 5987 extended value. The empty string does not qualify.
    """
    return TEXT_RE.fullmatch(value) is not None


def has_hex_escape(value: str) -> bool:
    return HEX_ESCAPE_RE.search(value) is not None


def is_extended_name(name: str) -> bool:
    # "filename*" is extended; "filename*0" and "filename*0*" are opaque names
    return name.find("*") == len(name) - 1
