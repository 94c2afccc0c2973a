import sys
import os
from typing import List, Optional

# Add project root to path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.config import PickerConfig
from core.picker import create


def run_demo(seed: Optional[int] = None) -> List[List[int]]:
    """
    Draw from a pool of 10, resize it to 20 and draw a full pool, then 50 more.
    Returns the three batches in order.
    """
    picker = create(10, config=PickerConfig(seed=seed))

    batches = [picker.draw_many(10)]

    # resizing forgets everything seen so far
    picker.set_capacity(20)
    batches.append(picker.draw_many(20))

    # crosses two more pool resets; compare with experiments/run_distribution.py
    batches.append(picker.draw_many(50))
    return batches


def main(seed: Optional[int] = None) -> None:
    """
    Entry point for the non-repeating picker demonstration.
    """
    for batch in run_demo(seed):
        print(batch)


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    main(seed=args.seed)
