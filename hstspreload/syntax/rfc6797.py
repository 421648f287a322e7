"""
Regex for STS

These regex are directly derived from the core ABNF in RFC6797:

  https://www.rfc-editor.org/rfc/rfc6797#section-6.1

They should be processed with re.VERBOSE.
"""
from .rfc5234 import DIGIT
from .rfc7230 import quoted_string, token

# directive-value           = token | quoted-string
directive_value = rf"(?: {token} | {quoted_string} )"

# directive-name            = token
directive_name = token

# directive                 = directive-name [ "=" directive-value ]
directive = rf"(?: {directive_name} (?: = {directive_value} )? )"

# max-age-value             = delta-seconds
# delta-seconds             = 1*DIGIT
# https://www.rfc-editor.org/rfc/rfc6797#section-6.1.1
# The preload list only accepts the unquoted form.
max_age_value = rf"(?: {DIGIT}+ )"
