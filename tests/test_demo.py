import pytest

from balancedtree.demo import main, run_demo


class TestDemo:
    def test_default_run(self, capsys):
        # Run the demo with the default keys.
        assert main([]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Inserting values: 10, 20, 30, 40, 50, 25",
            "In-order traversal (sorted): [10, 20, 25, 30, 40, 50]",
            "Pre-order traversal: [30, 20, 10, 25, 40, 50]",
            "Post-order traversal: [10, 25, 20, 50, 40, 30]",
            "Level-order traversal: [30, 20, 40, 10, 25, 50]",
            "",
            "Removing value 30...",
            "In-order traversal (sorted): [10, 20, 25, 40, 50]",
            "",
            "Tree contains 25? Yes",
            "Tree contains 30? No",
        ]

    def test_custom_run(self, capsys):
        tree = run_demo(values=[5, 3, 8], remove=[], probe=[8], orders=["levelorder"])

        assert tree.to_in_order_list() == [3, 5, 8]
        assert capsys.readouterr().out.splitlines() == [
            "Inserting values: 5, 3, 8",
            "Level-order traversal: [5, 3, 8]",
            "",
            "Tree contains 8? Yes",
        ]

    def test_invalid_order(self):
        # Argparse rejects orders outside the four traversals.
        with pytest.raises(SystemExit) as error:
            main(["--orders", "sideways"])
        assert error.value.code == 2
