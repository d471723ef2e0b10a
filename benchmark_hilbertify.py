
import time
import numpy as np

from bincurve.pixelgrid import PixelGrid
from bincurve.hilbert import HilbertCurve

def benchmark_hilbertify(size=1024):
    colors = np.random.randint(0, 256, size=(size * size, 3), dtype=np.uint8)
    grid = PixelGrid(colors, size)
    print(f"Grid size: {grid.width}x{grid.height} = {len(grid)} pixels")

    start_time = time.time()
    grid.hilbertify()
    print(f"hilbertify time: {time.time() - start_time:.4f} seconds")

    start_time = time.time()
    grid.unhilbertify()
    print(f"unhilbertify time: {time.time() - start_time:.4f} seconds")

    assert np.array_equal(grid.data, colors)

def benchmark_scalar(size=256):
    curve = HilbertCurve(size)

    start_time = time.time()
    for i in range(len(curve)):
        curve.point_to_value(curve.value_to_point(i))
    print(f"scalar round trip ({len(curve)} points): {time.time() - start_time:.4f} seconds")

if __name__ == "__main__":
    benchmark_hilbertify()
    benchmark_scalar()
