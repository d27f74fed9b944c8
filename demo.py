"""Hensachi Demo — rate a score against a class's score table.

Usage:
    uv run python demo.py
"""

from hensachi.analysis.pipeline import AnalysisSession
from hensachi.models import RawRow


def main():
    # Score table as typed into the form: (score, number of people)
    session = AnalysisSession([
        RawRow("40", "1"),
        RawRow("55", "4"),
        RawRow("60", "2"),
        RawRow("70", "6"),
        RawRow("80", "3"),
        RawRow("95", "1"),
        RawRow("", "10"),   # blank score — ignored
        RawRow("50", "0"),  # nobody — ignored
    ])

    result = session.calculate()
    stats = result.stats
    print(f"People: {stats.total_count} ({stats.n_rows} valid rows)")
    print(f"Average: {stats.average:.2f}")
    print(f"Std dev: {stats.std_dev:.2f}\n")

    # Coarse text rendering of the sampled curve
    print("=" * 60)
    print("NORMAL DISTRIBUTION CURVE")
    print("=" * 60)
    peak = max(result.curve_densities)
    for point in result.curve[::5]:
        bar = "#" * round(point.density / peak * 40)
        print(f"  {point.label:>6} | {bar}")

    for my_score in (55, 70, 88):
        dev = session.score(my_score)
        direction = {"above": "above", "below": "below", "equal": "at"}[dev.position]
        print(
            f"\nScore {my_score}: deviation value {dev.deviation_value} "
            f"({abs(dev.score_difference):.2f} points {direction} the average)"
        )


if __name__ == "__main__":
    main()
