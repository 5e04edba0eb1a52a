"""
Intervention Catalog and Selection Set
The fixed table of urban interventions and the user's choice among them
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union
from utils.constants import INTERVENTION_CATEGORIES
from utils.helpers import round_half_up

logger = logging.getLogger(__name__)


class InterventionCategory(str, Enum):
    TRAFFIC_TRANSPORT = "traffic_transport"
    URBAN_DESIGN = "urban_design"
    POLICY_QUICK_FIXES = "policy_quick_fixes"

    @property
    def display_name(self) -> str:
        return INTERVENTION_CATEGORIES[self.value]["name"]


class Intervention(str, Enum):
    """The 18 intervention keys, valued by their wire names"""

    # Traffic & Transport
    DEDICATED_BUS_LANES = "dedicatedBusLanes"
    BIKE_WALKING_INFRASTRUCTURE = "bikeWalkingInfrastructure"
    SMART_TRAFFIC_SIGNALS = "smartTrafficSignals"
    VEHICLE_RESTRICTIONS = "vehicleRestrictions"
    PUBLIC_TRANSPORT_BOOST = "publicTransportBoost"
    EV_CHARGING_INCENTIVES = "evChargingIncentives"

    # Urban Design & Environment
    TREE_CANOPY_GREEN_BUFFERS = "treeCanopyGreenBuffers"
    LOW_EMISSION_ZONE = "lowEmissionZone"
    DUST_CONTROL_MEASURES = "dustControlMeasures"
    STREET_TREES = "streetTrees"
    GREEN_WALLS = "greenWalls"
    PERMEABLE_PAVEMENT = "permeablePavement"

    # Policy & Quick Fixes
    BAN_OPEN_BURNING = "banOpenBurning"
    CONSTRUCTION_DUST_CONTROL = "constructionDustControl"
    WASTE_MANAGEMENT = "wasteManagement"
    INDUSTRIAL_EMISSION_CONTROLS = "industrialEmissionControls"
    VEHICLE_EMISSION_TESTING = "vehicleEmissionTesting"
    PUBLIC_AWARENESS = "publicAwareness"

    @classmethod
    def parse(cls, key: Union[str, "Intervention"]) -> Optional["Intervention"]:
        """Look up a key by wire name; None when it is not a catalog key"""
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            return None


class InterventionSpec(NamedTuple):
    key: Intervention
    category: InterventionCategory
    label: str
    description: str
    impact_range: str
    reduction_fraction: float


_T = InterventionCategory.TRAFFIC_TRANSPORT
_U = InterventionCategory.URBAN_DESIGN
_P = InterventionCategory.POLICY_QUICK_FIXES

_CATALOG_ENTRIES = [
    InterventionSpec(Intervention.DEDICATED_BUS_LANES, _T, "Dedicated Bus Lanes",
                     "Priority lanes for buses reduce congestion + emissions", "10-15% AQI reduction", 0.12),
    InterventionSpec(Intervention.BIKE_WALKING_INFRASTRUCTURE, _T, "Bike & Walking Infrastructure",
                     "Protected bike lanes, wider footpaths", "5-10% AQI reduction", 0.08),
    InterventionSpec(Intervention.SMART_TRAFFIC_SIGNALS, _T, "Smart Traffic Signals",
                     "AI-based adaptive signal timing", "7-12% AQI reduction", 0.10),
    InterventionSpec(Intervention.VEHICLE_RESTRICTIONS, _T, "Vehicle Restrictions",
                     "Odd-even license plate days or no-entry zones", "10-20% AQI reduction", 0.15),
    InterventionSpec(Intervention.PUBLIC_TRANSPORT_BOOST, _T, "Public Transport Boost",
                     "More buses/metro frequency, lower fares", "10-15% AQI reduction", 0.12),
    InterventionSpec(Intervention.EV_CHARGING_INCENTIVES, _T, "EV Charging & Incentives",
                     "Support shift from petrol/diesel to EVs", "10-20% AQI reduction", 0.15),

    InterventionSpec(Intervention.TREE_CANOPY_GREEN_BUFFERS, _U, "Tree Canopy & Green Buffers",
                     "Street trees, mini forests, green walls", "5-8% AQI reduction", 0.08),
    InterventionSpec(Intervention.LOW_EMISSION_ZONE, _U, "Low-Emission Zone (LEZ)",
                     "Only EVs, CNG buses, low-emission cars allowed", "15-20% AQI reduction", 0.18),
    InterventionSpec(Intervention.DUST_CONTROL_MEASURES, _U, "Dust Control Measures",
                     "Spraying roads, covering construction sites", "10% AQI reduction", 0.10),
    InterventionSpec(Intervention.STREET_TREES, _U, "Street Trees",
                     "Strategic tree planting along roads", "5-6% AQI reduction", 0.06),
    InterventionSpec(Intervention.GREEN_WALLS, _U, "Green Walls",
                     "Vertical vegetation systems on buildings", "4-5% AQI reduction", 0.05),
    InterventionSpec(Intervention.PERMEABLE_PAVEMENT, _U, "Permeable Pavement",
                     "Water-absorbing surfaces reduce dust", "3-4% AQI reduction", 0.04),

    InterventionSpec(Intervention.BAN_OPEN_BURNING, _P, "Ban Open Burning",
                     "Prevent trash/leaf burning - huge PM2.5 impact", "15-25% AQI reduction", 0.20),
    InterventionSpec(Intervention.CONSTRUCTION_DUST_CONTROL, _P, "Construction Dust Control",
                     "Mandatory dust suppression at construction sites", "10-12% AQI reduction", 0.12),
    InterventionSpec(Intervention.WASTE_MANAGEMENT, _P, "Waste Management",
                     "Proper waste collection and disposal systems", "6-8% AQI reduction", 0.08),
    InterventionSpec(Intervention.INDUSTRIAL_EMISSION_CONTROLS, _P, "Industrial Emission Controls",
                     "Strict emission standards for factories", "18-22% AQI reduction", 0.22),
    InterventionSpec(Intervention.VEHICLE_EMISSION_TESTING, _P, "Vehicle Emission Testing",
                     "Regular testing and maintenance requirements", "8-10% AQI reduction", 0.10),
    InterventionSpec(Intervention.PUBLIC_AWARENESS, _P, "Public Awareness",
                     "Education campaigns on air quality", "3-5% AQI reduction", 0.05),
]


class InterventionCatalog:
    """
    Read-only table mapping each intervention to its AQI reduction fraction

    The fraction is the share of the current AQI an intervention removes when
    adopted alone. Display metadata lives next to it so that the calculation
    and the cards shown to the user read the same numbers.
    """

    def __init__(self, entries: Iterable[InterventionSpec]):
        self._entries: Dict[Intervention, InterventionSpec] = {}
        for spec in entries:
            self._entries[spec.key] = spec
        self._validate()

    def _validate(self):
        missing = [key.value for key in Intervention if key not in self._entries]
        if missing:
            raise ValueError(f"Intervention catalog is missing entries: {', '.join(missing)}")

        for spec in self._entries.values():
            if not 0.0 < spec.reduction_fraction < 1.0:
                raise ValueError(
                    f"Reduction fraction for {spec.key.value} must be in (0, 1), "
                    f"got {spec.reduction_fraction}"
                )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        parsed = Intervention.parse(key)
        return parsed is not None and parsed in self._entries

    def keys(self) -> List[Intervention]:
        """Catalog keys in display order"""
        return list(self._entries.keys())

    def specs(self) -> List[InterventionSpec]:
        return list(self._entries.values())

    def get(self, key: Union[str, Intervention]) -> Optional[InterventionSpec]:
        parsed = Intervention.parse(key)
        if parsed is None:
            return None
        return self._entries.get(parsed)

    def fraction(self, key: Union[str, Intervention]) -> float:
        """Reduction fraction for a key, 0.0 for keys outside the catalog"""
        spec = self.get(key)
        return spec.reduction_fraction if spec else 0.0

    def by_category(self) -> Dict[InterventionCategory, List[InterventionSpec]]:
        grouped: Dict[InterventionCategory, List[InterventionSpec]] = {
            category: [] for category in InterventionCategory
        }
        for spec in self._entries.values():
            grouped[spec.category].append(spec)
        return grouped

    def display_reduction(self, aqi: float, key: Union[str, Intervention]) -> int:
        """AQI points shown on an intervention card for the given baseline"""
        return round_half_up(aqi * self.fraction(key))

    def describe(self, aqi: Optional[float] = None) -> List[Dict]:
        """
        Display rows for the presentation layer, grouped by category

        Args:
            aqi: Optional baseline AQI; when given, each row carries the
                AQI points the intervention would remove on its own

        Returns:
            List of category dicts with their interventions
        """
        groups = []
        for category, specs in self.by_category().items():
            rows = []
            for spec in specs:
                row = {
                    "key": spec.key.value,
                    "label": spec.label,
                    "description": spec.description,
                    "impact": spec.impact_range,
                    "reductionFraction": spec.reduction_fraction,
                }
                if aqi is not None:
                    row["aqiReduction"] = self.display_reduction(aqi, spec.key)
                rows.append(row)

            groups.append({
                "category": category.value,
                "name": category.display_name,
                "typicalRange": INTERVENTION_CATEGORIES[category.value]["typical_range"],
                "interventions": rows,
            })
        return groups


# Process-wide catalog, built once at import
INTERVENTION_CATALOG = InterventionCatalog(_CATALOG_ENTRIES)


class SelectionSet:
    """
    Immutable set of selected interventions

    Keys that are not in the catalog are remembered in `unknown_keys` so
    callers can report them, but they never take part in a calculation.
    """

    __slots__ = ("_selected", "_unknown")

    def __init__(self, selected: Iterable[Intervention] = (), unknown_keys: Iterable[str] = ()):
        self._selected = frozenset(selected)
        self._unknown = frozenset(unknown_keys)

    @classmethod
    def empty(cls) -> "SelectionSet":
        return cls()

    @classmethod
    def all(cls) -> "SelectionSet":
        return cls(Intervention)

    @classmethod
    def of(cls, *keys: Union[str, Intervention]) -> "SelectionSet":
        return cls.from_mapping({key: True for key in keys})

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping]) -> "SelectionSet":
        """
        Build a selection from a {key: bool} mapping

        Args:
            mapping: Intervention key (wire name or enum) to selected flag

        Returns:
            SelectionSet with every truthy known key selected
        """
        selected = []
        unknown = []
        for key, value in (mapping or {}).items():
            parsed = Intervention.parse(key)
            if parsed is None:
                unknown.append(str(key))
                continue
            if value:
                selected.append(parsed)

        if unknown:
            logger.warning(f"Ignoring unknown intervention keys: {', '.join(sorted(unknown))}")

        return cls(selected, unknown)

    @property
    def selected(self) -> Tuple[Intervention, ...]:
        """Selected keys in catalog order"""
        return tuple(key for key in Intervention if key in self._selected)

    @property
    def unknown_keys(self) -> Tuple[str, ...]:
        return tuple(sorted(self._unknown))

    def is_selected(self, key: Union[str, Intervention]) -> bool:
        parsed = Intervention.parse(key)
        return parsed is not None and parsed in self._selected

    def with_toggle(self, key: Union[str, Intervention], value: Optional[bool] = None) -> "SelectionSet":
        """
        Return a new selection with one key switched

        Args:
            key: Intervention to change
            value: New state; flips the current state when None
        """
        parsed = Intervention.parse(key)
        if parsed is None:
            logger.warning(f"Ignoring toggle of unknown intervention key: {key}")
            return SelectionSet(self._selected, self._unknown | {str(key)})

        state = (parsed not in self._selected) if value is None else bool(value)
        selected = set(self._selected)
        if state:
            selected.add(parsed)
        else:
            selected.discard(parsed)
        return SelectionSet(selected, self._unknown)

    def as_dict(self) -> Dict[str, bool]:
        """All 18 keys mapped to their selected flag"""
        return {key.value: key in self._selected for key in Intervention}

    def __len__(self) -> int:
        return len(self._selected)

    def __iter__(self):
        return iter(self.selected)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return self._selected == other._selected

    def __hash__(self) -> int:
        return hash(self._selected)

    def __repr__(self) -> str:
        return f"SelectionSet({[key.value for key in self.selected]})"
