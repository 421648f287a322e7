"""
Regex for the ABNF core rules of RFC5234

  <https://www.rfc-editor.org/rfc/rfc5234#appendix-B.1>

They should be processed with re.VERBOSE.
"""

# ALPHA          =  %x41-5A / %x61-7A   ; A-Z / a-z
ALPHA = r"[\x41-\x5A\x61-\x7A]"

# DIGIT          =  %x30-39             ; 0-9
DIGIT = r"[\x30-\x39]"

# DQUOTE         =  %x22                ; " (Double Quote)
DQUOTE = r"\x22"

# HTAB           =  %x09                ; horizontal tab
HTAB = r"\x09"

# SP             =  %x20
SP = r"\x20"

# VCHAR          =  %x21-7E             ; visible (printing) characters
VCHAR = r"[\x21-\x7E]"
