"""
Constants used throughout the Respire Intervention Simulator
AQI thresholds, pollutant ratios, and the coefficients of the impact model
"""

# ==================== AQI Thresholds ====================

AQI_BREAKPOINTS = {
    "good": {"min": 0, "max": 50, "color": "#00e400"},
    "moderate": {"min": 51, "max": 100, "color": "#ffff00"},
    "unhealthy_sensitive": {"min": 101, "max": 150, "color": "#ff7e00"},
    "unhealthy": {"min": 151, "max": 200, "color": "#ff0000"},
    "very_unhealthy": {"min": 201, "max": 300, "color": "#8f3f97"},
    "hazardous": {"min": 301, "max": 500, "color": "#7e0023"},
}

# ==================== Risk Level Names ====================

RISK_LEVELS = {
    "good": "Good",
    "moderate": "Moderate",
    "unhealthy_sensitive": "Unhealthy for Sensitive Groups",
    "unhealthy": "Unhealthy",
    "very_unhealthy": "Very Unhealthy",
    "hazardous": "Hazardous",
}

# ==================== Pollutant Estimates ====================

# Share of the composite AQI attributed to each pollutant in the baseline
POLLUTANT_RATIOS = {
    "pm25": 0.4,
    "pm10": 0.6,
    "no2": 0.2,
}

# Weight applied to the AQI improvement percent for each pollutant.
# Presentation heuristics, not independently modelled pollutants.
POLLUTANT_REDUCTION_WEIGHTS = {
    "pm25": 0.8,
    "pm10": 0.6,
    "no2": 0.4,
}

# ==================== Presentational Heuristics ====================
# Affine functions of the improvement percent; plausible display values only,
# not derived from cost data or measurements.

COST_BENEFIT_BASE = 2.5
COST_BENEFIT_DIVISOR = 20

TIMELINE_BASE_MONTHS = 6
TIMELINE_DIVISOR = 10

CONFIDENCE_BASE = 0.85
CONFIDENCE_DIVISOR = 400

# ==================== Intervention Categories ====================

INTERVENTION_CATEGORIES = {
    "traffic_transport": {
        "name": "Traffic & Transport",
        "typical_range": "5-20% AQI reduction",
    },
    "urban_design": {
        "name": "Urban Design & Environment",
        "typical_range": "5-20% AQI reduction",
    },
    "policy_quick_fixes": {
        "name": "Policy & Quick Fixes",
        "typical_range": "10-25% AQI reduction",
    },
}

# ==================== Reports ====================

REPORT_DATE_FORMAT = "%Y-%m-%d"

# ==================== API Response Messages ====================

API_MESSAGES = {
    "no_simulation": "Please run a simulation first by selecting interventions",
    "export_failed": "Failed to generate PDF report. Please try again.",
}
