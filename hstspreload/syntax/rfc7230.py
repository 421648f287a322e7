"""
Regex for the parts of RFC7230 used by the STS grammar

  <https://www.rfc-editor.org/rfc/rfc7230#appendix-B>

They should be processed with re.VERBOSE.
"""
from .rfc5234 import ALPHA, DIGIT, DQUOTE, HTAB, SP, VCHAR

# tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                / DIGIT / ALPHA
tchar = rf"(?: [!\#$%&'*+\-.^_`|~] | {DIGIT} | {ALPHA} )"

# token          = 1*tchar
token = rf"(?: {tchar}+ )"

# obs-text       = %x80-FF
obs_text = r"[\x80-\xFF]"

# qdtext         = HTAB / SP / %x21 / %x23-5B / %x5D-7E / obs-text
qdtext = rf"(?: {HTAB} | {SP} | \x21 | [\x23-\x5B] | [\x5D-\x7E] | {obs_text} )"

# quoted-pair    = "\" ( HTAB / SP / VCHAR / obs-text )
quoted_pair = rf"(?: \\ (?: {HTAB} | {SP} | {VCHAR} | {obs_text} ) )"

# quoted-string  = DQUOTE *( qdtext / quoted-pair ) DQUOTE
quoted_string = rf"(?: {DQUOTE} (?: {qdtext} | {quoted_pair} )* {DQUOTE} )"
