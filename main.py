import time

import numpy as np

import settings
from canvas import Canvas
from sampler import sample
from utils import setup_default_logging


def main():
    setup_default_logging(settings.LOG_LEVEL)
    start = time.time()

    rng = np.random.default_rng(settings.SEED)
    canvas = Canvas(sample(rng, settings.DEFAULT_SETTINGS))

    # a failed write is fatal, nothing to recover
    canvas.write(settings.OUTPUT_PATH)
    if settings.PREVIEW_PATH:
        canvas.save_preview(settings.PREVIEW_PATH, (settings.WIDTH, settings.HEIGHT))

    end = time.time()
    elapsed = (end - start) * 1000
    print(f"Total time: {elapsed :.2f}ms")


if __name__ == "__main__":
    main()
