"""Application constants."""

USER_AGENT = "gurs-housenumbers/1.0 (+https://www.openstreetmap.org)"
STAGES = (
    "fetch",
    "convert",
)
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20

DEFAULT_INPUT_PATH = "data/temp/HS-etrs89/SI.GURS.RPE.PUB.HS-etrs89.shp"
DEFAULT_OUTPUT_PATH = "data/slovenia-housenumbers.geojson"
CONFIG_FILENAME = "gurs.yml"

LOOKUP_TABLES = (
    "postal_code",
    "city_name",
    "street_name",
    "street_name_alt",
    "settlement_name",
    "settlement_name_alt",
)

# Status value of the currently valid version of a house number record.
VALID_STATUS = "V"

# 7 decimals
ROUNDING_FACTOR = 10_000_000

# Bilingual names east of this meridian are Hungarian, otherwise Italian.
ITALIAN_HUNGARIAN_SPLIT_LONGITUDE = 14.5

# OpenStreetMap tags
TAG_HOUSENUMBER = "addr:housenumber"
TAG_CITY = "addr:city"
TAG_POSTCODE = "addr:postcode"
TAG_STREET = "addr:street"
TAG_PLACE = "addr:place"
TAG_SOURCE_DATE = "source:addr:date"
TAG_SOURCE = "source:addr"
TAG_REF = "ref:GURS:HS_MID"
SOURCE_VALUE = "GURS"

LANG_SUFFIX_SLOVENIAN = ":sl"
LANG_SUFFIX_ITALIAN = ":it"
LANG_SUFFIX_HUNGARIAN = ":hu"
BILINGUAL_SEPARATOR = " / "

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "table",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
