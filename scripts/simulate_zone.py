"""
Intervention Simulation Script for the Respire Intervention Simulator
Run the impact calculator for one zone and optionally export the PDF report
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.settings import settings
from data.zones import ZoneDataSource, ZoneNotFoundError
from models.impact_calculator import ImpactCalculator
from models.interventions import INTERVENTION_CATALOG, SelectionSet
from models.report_exporter import PdfReportExporter, ReportExportError


def print_catalog(aqi: float = None):
    """Print the intervention catalog grouped by category"""
    for group in INTERVENTION_CATALOG.describe(aqi):
        print(f"\n{group['name']} ({group['typicalRange']})")
        for row in group['interventions']:
            badge = f"  -{row['aqiReduction']} AQI" if 'aqiReduction' in row else ""
            print(f"  {row['key']:<28} {row['impact']:<22}{badge}")


def print_result(result):
    """Print the headline numbers of a simulation result"""
    baseline = result.baseline
    impact = result.results

    print("\n" + "=" * 60)
    print(f"SIMULATION RESULT - {result.zone_id}")
    print("=" * 60)
    print(f"AQI:                 {baseline.current_aqi:.0f} -> {baseline.new_aqi:.0f}")
    print(f"Risk level:          {baseline.current_risk_level} -> {baseline.new_risk_level}")
    print(f"Improvement:         {impact.aqi_reduction:.0f}%")
    print(f"PM2.5 / PM10 / NO2:  -{impact.pm25_reduction:.0f}% / -{impact.pm10_reduction:.0f}% / -{impact.no2_reduction:.0f}%")
    print(f"People benefited:    {impact.population_benefited:,}")
    print(f"Cost-benefit ratio:  {impact.cost_benefit_ratio:.2f} (heuristic)")
    print(f"Timeline (months):   {impact.implementation_timeline_months:.1f} (heuristic)")
    print(f"Confidence:          {impact.confidence:.2f} (heuristic)")
    print("=" * 60)


def main(zone_id: str, keys=None, select_all: bool = False, rank: bool = False, pdf: bool = False) -> int:
    zones = ZoneDataSource()
    calculator = ImpactCalculator()

    try:
        baseline = zones.get_baseline(zone_id)
    except ZoneNotFoundError as e:
        print(f"✗ {e}")
        print(f"Known zones: {', '.join(z.zone_id for z in zones.list_zones())}")
        return 1

    print(f"Zone: {baseline.zone_name} (AQI {baseline.aqi:.0f}, {baseline.population_exposed:,} people)")

    if rank:
        df = calculator.rank_interventions(baseline)
        print("\nInterventions ranked by impact (adopted alone):")
        print(df[['key', 'category', 'aqiReduction', 'newAqi']].to_string(index=False))

    selections = SelectionSet.all() if select_all else SelectionSet.of(*(keys or []))
    for key in selections.unknown_keys:
        print(f"⚠️  Unknown intervention ignored: {key}")

    result = calculator.compute(baseline, selections)
    print_result(result)

    if pdf:
        try:
            path = PdfReportExporter().save(result, settings.REPORTS_DIR)
            print(f"\n✓ Report saved: {path}")
        except ReportExportError as e:
            print(f"\n✗ {e.message}")
            return 1

    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Simulate urban interventions for a zone')
    parser.add_argument(
        '--zone',
        type=str,
        default='abids-road',
        help='Zone id (default: abids-road)'
    )
    parser.add_argument(
        '--select',
        action='append',
        default=[],
        help='Intervention key to select (repeatable)'
    )
    parser.add_argument(
        '--all',
        action='store_true',
        help='Select every intervention'
    )
    parser.add_argument(
        '--rank',
        action='store_true',
        help='Also print interventions ranked by individual impact'
    )
    parser.add_argument(
        '--pdf',
        action='store_true',
        help=f'Write the PDF report to {settings.REPORTS_DIR}'
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List intervention keys and exit'
    )

    args = parser.parse_args()

    if args.list:
        print_catalog()
        sys.exit(0)

    sys.exit(main(
        zone_id=args.zone,
        keys=args.select,
        select_all=args.all,
        rank=args.rank,
        pdf=args.pdf
    ))
