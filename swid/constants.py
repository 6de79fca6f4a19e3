"""Default values shared by the tag builders."""

TAG_VERSION_DEFAULT = 0

# Setting version / versionScheme to these values clears the field
VERSION_DEFAULT = "0.0"
VERSION_SCHEME_DEFAULT = "multipartnumeric"

REGID_DEFAULT = "http://invalid.unavailable"

UNDETERMINED_LANGUAGE = "und"
