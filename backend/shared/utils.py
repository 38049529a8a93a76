from datetime import datetime


def print_summary(
    title: str, counts: dict[str, int], notes: dict[str, int] | None = None
) -> None:
    """Print processing summary.

    `counts` are summed into the total; `notes` are listed after it.
    """
    notes = notes or {}
    labels = {key: key.replace("_", " ").capitalize() + ":" for key in {**counts, **notes}}
    width = max([10] + [len(label) + 1 for label in labels.values()])

    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] {title}")
    print(f"{'=' * 60}")
    for key, count in counts.items():
        print(f"{labels[key]:<{width}}{count}")
    print(f"{'Total:':<{width}}{sum(counts.values())}")
    for key, count in notes.items():
        print(f"{labels[key]:<{width}}{count}")
    print(f"{'=' * 60}\n")
