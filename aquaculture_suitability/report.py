"""
Plain-text summary of suitability results.
"""

from __future__ import annotations

import pandas as pd

from .suitability import SpeciesSuitability


def compare_species(results) -> pd.DataFrame:
    """Suitable area (km2) per region, one column per species."""
    return pd.DataFrame(
        {r.species.name: r.zonal["suitable_area_km2"] for r in results}
    )


def species_section(result: SpeciesSuitability) -> str:
    zonal = result.zonal
    width = max(20, max((len(str(n)) for n in zonal.index), default=0) + 2)
    lines = [
        f"{result.species.name.upper()}",
        f"   - Criteria:     {result.species.describe()}",
        f"   - Total area:   {result.total_area_km2:,.0f} km2",
        "",
        f"   {'Region':<{width}} {'Area (km2)':>12} {'Suitable':>10}",
    ]
    for name, row in zonal.iterrows():
        lines.append(f"   {str(name):<{width}} {row['suitable_area_km2']:>12,.0f} "
                     f"{row['pct_suitable']:>9.2f}%")
    return "\n".join(lines)


def summary_report(results) -> str:
    results = list(results)
    parts = ["WEST COAST AQUACULTURE SUITABILITY", "-" * 60]
    for i, result in enumerate(results, start=1):
        parts.append(f"\n{i}. {species_section(result)}")

    if len(results) > 1:
        table = compare_species(results)
        parts.append(f"\n{len(results) + 1}. COMPARISON (suitable km2)")
        parts.append(table.round(0).to_string())
        best = table.sum().idxmax()
        parts.append(f"\n   Largest total suitable area: {best}")
    parts.append("-" * 60)
    return "\n".join(parts)
