"""Application constants."""

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20

EXPECTED_COLUMN_COUNT = 31
PLACENAME_COLUMN_INDEX = 13

COLUMN_POSTCODE = "PCD"
COLUMN_SUPERGROUP_CODE = "OAC_Supergroup_Code"
COLUMN_SUPERGROUP_NAME = "OAC_Supergroup_Name"
COLUMN_GROUP_CODE = "OAC_Group_Code"
COLUMN_SUBGROUP_CODE = "OAC_Subgroup_Code"
COLUMN_SUBGROUP_NAME = "OAC_Subgroup_Name"
COLUMN_TOTAL_PERSONS = "Total_Persons"
COLUMN_FEMALES = "Females"
COLUMN_MALES = "Males"
COLUMN_HOUSEHOLDS = "Occupied_Households"
COLUMN_AREA_NAME = "LSOA_DZ_Name"
COLUMN_AREA_DEPRIVATION = "LSOA_DZ_Townsend_Deprivation_Score"
COLUMN_POSTCODE_DEPRIVATION = "OA_SA_Townsend_Deprivation_Score"

INTEGER_COLUMNS = (
    COLUMN_TOTAL_PERSONS,
    COLUMN_FEMALES,
    COLUMN_MALES,
    COLUMN_HOUSEHOLDS,
)
FLOAT_COLUMNS = (
    COLUMN_AREA_DEPRIVATION,
    COLUMN_POSTCODE_DEPRIVATION,
)

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "area",
    "event",
    "status",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
