"""
models.py — Python dataclasses for the soil profile recorder.

Attribute names are snake_case; the JSON keys used for on-device storage and
export keep the field form's camelCase names (``depthFrom``, ``sampleNo``...).
The mapping lives in each field's ``metadata['key']``.
"""

import re
from dataclasses import dataclass, field, fields
from typing import ClassVar, List, Optional, Tuple


_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(value) -> int:
    """Parse the leading integer of a form value, falling back to 0.

    Mirrors what a browser number input hands over: "12" -> 12,
    " 35cm" -> 35, "7.9" -> 7, "" or "abc" -> 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def _text(key, default=''):
    return field(default=default, metadata={'key': key})


def _number(key, default=0):
    return field(default=default, metadata={'key': key})


class JsonRecord:
    """Mixin for dataclasses stored as camelCase JSON objects."""

    # Fields holding integers entered through text inputs
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ()
    # Fields cleared when a record is duplicated
    IDENTITY_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict:
        return {f.metadata.get('key', f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[dict]):
        """Build a record from stored JSON; missing keys keep their defaults.

        Raises:
            ValueError: data is not an object, or a text field holds a list
                or object.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{cls.__name__} must be an object, got {type(data).__name__}")
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get('key', f.name)
            if key not in data:
                continue
            value = data[key]
            if f.name in cls.NUMERIC_FIELDS:
                value = parse_int(value)
            elif value is None:
                value = ''
            elif isinstance(value, (dict, list)):
                raise ValueError(f"{cls.__name__}.{key} must be text")
            elif not isinstance(value, str):
                value = str(value)
            kwargs[f.name] = value
        return cls(**kwargs)


def _rows(data, key):
    """List stored under key (missing or null -> empty)."""
    rows = data.get(key)
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise ValueError(f"'{key}' must be a list")
    return rows


def _document(data):
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"sheet must be an object, got {type(data).__name__}")
    return data


@dataclass
class Observation(JsonRecord):
    """Sheet-1 depth-interval observation (shallow pit / auger bore)."""
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ('depth_from', 'depth_to')

    depth_from: int = _number('depthFrom')
    depth_to: int = _number('depthTo')
    colour: str = _text('colour')
    texture: str = _text('texture')
    mottles: str = _text('mottles', 'None')
    reaction: str = _text('reaction')
    concretions: str = _text('concretions', 'None')
    rock_fragments: str = _text('rockFragments', '0–5%')


@dataclass
class Horizon(JsonRecord):
    """Sheet-2 horizon: a depth-bounded layer with its morphology."""
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ('depth_from', 'depth_to')
    IDENTITY_FIELDS: ClassVar[Tuple[str, ...]] = ('label', 'sample_no')

    label: str = _text('label')
    depth_from: int = _number('depthFrom')
    depth_to: int = _number('depthTo')
    boundary_distinct: str = _text('boundaryDistinct')
    boundary_topo: str = _text('boundaryTopo')
    colour: str = _text('colour')
    mottles: str = _text('mottles', 'None')
    texture: str = _text('texture')
    structure_grade: str = _text('structureGrade')
    structure_size: str = _text('structureSize')
    structure_type: str = _text('structureType')
    consistence_dry: str = _text('consistenceDry')
    consistence_moist: str = _text('consistenceMoist')
    consistence_wet: str = _text('consistenceWet')
    coarse_fragments: str = _text('coarseFragments', '0–5%')
    concretions: str = _text('concretions', 'None')
    pores: str = _text('pores')
    cutans: str = _text('cutans', 'None')
    roots: str = _text('roots')
    cracks: str = _text('cracks', 'None')
    artefacts: str = _text('artefacts', 'None')
    lime: str = _text('lime', 'None visible')
    sample_no: str = _text('sampleNo')

    @property
    def display_label(self) -> str:
        """Row caption: "Ap 0-15cm" or "Horizon 0-15cm" when unlabelled."""
        return f"{self.label or 'Horizon'} {self.depth_from}-{self.depth_to}cm"


@dataclass
class Sheet1Header(JsonRecord):
    """Site and administrative details recorded once per profile."""
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ('slope',)

    # Location & admin
    nw_sub_watershed: str = _text('nwSubWatershed')
    village: str = _text('village')
    tehsil: str = _text('tehsil')
    district: str = _text('district')
    state: str = _text('state', 'Telangana')
    # Soil mapping
    series: str = _text('series')
    mapping_unit: str = _text('mappingUnit')
    auger_bore_no: str = _text('augerBoreNo')
    base_map: str = _text('baseMap')
    # Site description
    physiography: str = _text('physiography')
    site_location: str = _text('siteLocation')
    parent_material: str = _text('parentMaterial')
    slope: int = _number('slope')
    aspect: str = _text('aspect')
    natural_vegetation: str = _text('naturalVegetation')
    land_use: str = _text('landUse')
    saline_alkali: str = _text('salineAlkali', 'None')
    erosion_type: str = _text('erosionType', 'None')
    erosion_severity: str = _text('erosionSeverity', 'Slight')
    rocky_stony_phases: str = _text('rockyStonyPhases', 'None')
    remarks: str = _text('remarks')


@dataclass
class Sheet1Data:
    """Sheet-1 document: header plus repeated observations."""
    header: Sheet1Header = field(default_factory=Sheet1Header)
    observations: List[Observation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'header': self.header.to_dict(),
            'observations': [o.to_dict() for o in self.observations],
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'Sheet1Data':
        data = _document(data)
        return cls(
            header=Sheet1Header.from_dict(data.get('header')),
            observations=[Observation.from_dict(o) for o in _rows(data, 'observations')],
        )


@dataclass
class Sheet2Data:
    """Sheet-2 document: the horizon-by-horizon description."""
    horizons: List[Horizon] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {'horizons': [h.to_dict() for h in self.horizons]}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'Sheet2Data':
        data = _document(data)
        return cls(horizons=[Horizon.from_dict(h) for h in _rows(data, 'horizons')])


@dataclass
class User(JsonRecord):
    """Locally signed-in surveyor. No credentials are kept."""
    username: str = _text('username')
    logged_in_at: str = _text('loggedInAt')
