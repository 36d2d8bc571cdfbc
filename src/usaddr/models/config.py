"""Configuration and label vocabulary for the address tagger."""

from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path


class MarshalFormat(str, Enum):
    """How parse results cross the library boundary."""

    RAW_JSON = "raw_json"
    NATIVE_STRUCT = "native_struct"


def bundled_model_path() -> Path:
    """
    Location of the CRFsuite model shipped inside the package.

    The model binary is not distributed with the source tree. Until a trained
    ``usaddr.crfsuite`` is placed at this path, the default parser
    (``get_parser``, ``usaddr.parse``, the CLI without ``--model`` and the HTTP
    service) raises ``InitializationError``. Pass an explicit path to
    ``AddressParser.from_pretrained`` to use another model.
    """
    return Path(str(resources.files("usaddr") / "static" / "usaddr.crfsuite"))


@dataclass
class TaggerConfig:
    """Configuration for the address parsing pipeline."""

    # Model
    model_path: Path = field(default_factory=bundled_model_path)

    # Output
    group_tokens: bool = False


# Label definitions (must match the trained model)
LABELS = [
    "AddressNumberPrefix",
    "AddressNumber",
    "AddressNumberSuffix",
    "StreetNamePreModifier",
    "StreetNamePreDirectional",
    "StreetNamePreType",
    "StreetName",
    "StreetNamePostType",
    "StreetNamePostDirectional",
    "SubaddressType",
    "SubaddressIdentifier",
    "BuildingName",
    "OccupancyType",
    "OccupancyIdentifier",
    "CornerOf",
    "LandmarkName",
    "PlaceName",
    "StateName",
    "ZipCode",
    "USPSBoxType",
    "USPSBoxID",
    "USPSBoxGroupType",
    "USPSBoxGroupID",
    "IntersectionSeparator",
    "Recipient",
    "NotAddress",
]

LABEL2ID = {label: i for i, label in enumerate(LABELS)}
ID2LABEL = {i: label for i, label in enumerate(LABELS)}
