import csv

import pytest

from balancedtree.benchmark import HeightSample, fit_height_growth, main, run_height_benchmark, write_csv
from balancedtree.tree import Helper


class TestBenchmark:
    def test_run_height_benchmark(self):
        samples = run_height_benchmark(sizes=[0, 10, 100, 1000], seed=1)

        assert [sample.num_data for sample in samples] == [0, 10, 100, 1000]
        for sample in samples:
            assert sample.height <= sample.bound == Helper.max_avl_height(sample.num_data)

    def test_sequential_heights(self):
        # Ascending keys give the complete tree shape for 2^k - 1 keys.
        samples = run_height_benchmark(sizes=[7, 127, 1023], sequential=True)
        assert [sample.height for sample in samples] == [3, 7, 10]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            run_height_benchmark(sizes=[-1])

    def test_fit_height_growth(self):
        samples = run_height_benchmark(sizes=[16, 256, 4096], sequential=True)

        # Ascending keys grow the height by one per doubling.
        slope = fit_height_growth(samples)
        assert 0.9 < slope < 1.44

        with pytest.raises(ValueError):
            fit_height_growth(samples[:1])

    def test_write_csv(self, test_file):
        samples = [HeightSample(num_data=4, height=3, bound=4, insert_time=0.5, remove_time=0.25)]
        write_csv(samples, str(test_file))

        with open(test_file, newline="") as file:
            rows = list(csv.DictReader(file))

        assert rows == [{"num_data": "4", "height": "3", "bound": "4", "insert_time": "0.5", "remove_time": "0.25"}]

    def test_main(self, test_file, capsys):
        assert main(["--sizes", "8", "64", "--seed", "5", "--output", str(test_file)]) == 0

        out = capsys.readouterr().out
        assert "Height grows as" in out
        assert test_file.exists()
