"""
Configuration constants for keytrust.
These are immutable system constants, not runtime configuration.
"""

# Validity codes assigned by the trust engine
VALIDITY_MARGINAL = "m"
VALIDITY_FULL = "f"
VALIDITY_ULTIMATE = "u"
TRUSTED_VALIDITIES = frozenset([VALIDITY_MARGINAL, VALIDITY_FULL, VALIDITY_ULTIMATE])

# Capability letters (uppercase = usable capability of the whole key)
CAP_ENCRYPT = "E"
CAP_SIGN = "S"
CAP_CERTIFY = "C"
CAP_AUTHENTICATION = "A"
CAP_DEACTIVATED = "D"

# Fingerprint constants
FINGERPRINT_MIN_LENGTH = 25
SHORT_ID_LENGTH = 16
SHORT_ID_PREFIX = "0x"

# Display constants
DATE_FORMAT = "%Y-%m-%d"
INVALID_KEY_FORMAT = "(invalid:{fingerprint})"
FINGERPRINT_LINE_PREFIX = "      Key fingerprint = "
UID_LINE_PREFIX = "uid                            "

# Colon listing record types
RECORD_PUBLIC = "pub"
RECORD_SECRET = "sec"
RECORD_SUB_PUBLIC = "sub"
RECORD_SUB_SECRET = "ssb"
RECORD_FINGERPRINT = "fpr"
RECORD_USER_ID = "uid"
PRIMARY_RECORDS = frozenset([RECORD_PUBLIC, RECORD_SECRET])
SUB_KEY_RECORDS = frozenset([RECORD_SUB_PUBLIC, RECORD_SUB_SECRET])
COLON_ISO_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"

# Field count of a primary key record up to the capabilities field
PRIMARY_RECORD_MIN_FIELDS = 12
