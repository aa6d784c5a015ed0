# tests/test_integration.py
"""
Integration tests: every demo through the registry and the CLI.
"""

import logging
from unittest.mock import patch

import pytest
from patternbook import DEMOS, PatternCategory, PlaygroundConfig, get_demo, run_all, run_demo
from patternbook.cli import build_parser, format_bytes, main
from patternbook.demos import by_category, demo_names


pytestmark = pytest.mark.integration


class TestRegistry:
    """Test the demo registry."""

    def test_names_are_unique(self):
        names = demo_names()
        assert len(names) == len(set(names))

    def test_every_category_has_demos(self):
        for category in PatternCategory:
            assert by_category(category), category

    def test_get_demo(self):
        demo = get_demo("memento")
        assert demo.category is PatternCategory.BEHAVIORAL

    def test_unknown_demo(self):
        with pytest.raises(KeyError, match="known demos"):
            get_demo("singleton")

    @pytest.mark.parametrize("name", [demo.name for demo in DEMOS])
    def test_each_demo_runs(self, name, fast_config, capsys):
        run_demo(name, fast_config)
        assert capsys.readouterr().out

    def test_run_all(self, fast_config, capsys):
        names = run_all(fast_config)
        out = capsys.readouterr().out
        assert names == demo_names()
        for name in names:
            assert f"== Running {name} ==" in out

    def test_run_category(self, fast_config, capsys):
        names = run_all(fast_config, PatternCategory.STRUCTURAL)
        assert names == ["flyweight", "bridge", "facade", "decorator"]

    def test_verbose_sets_package_level(self, fast_config):
        fast_config.verbose = True
        run_demo("flyweight", fast_config)
        assert logging.getLogger("patternbook").level == logging.INFO

        run_demo("flyweight", PlaygroundConfig(delay_scale=0.0))
        assert logging.getLogger("patternbook").level == logging.WARNING


class TestDemoOutput:
    """Spot checks on the printed walkthroughs."""

    def test_decorator_output(self, fast_config, capsys):
        run_demo("decorator", fast_config)
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "['buns', 'ketchup', 'cheese', 'incredible patty', 'salad']"
        assert out[1] == "3.5"

    def test_futures_output(self, fast_config, capsys):
        run_demo("futures", fast_config)
        out = capsys.readouterr().out.splitlines()
        assert out[:2] == ["asyncOperation1 completed", " Handling result: Test Result "]
        assert out[-1] == "THEN: failure(SimpleError.errorCause1)"

    def test_flyweight_output(self, fast_config, capsys):
        run_demo("flyweight", fast_config)
        assert capsys.readouterr().out.startswith("7  Items: \n\nkale (x1)\ncarrots (x1)")

    def test_facade_output(self, fast_config, capsys):
        run_demo("facade", fast_config)
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "status=200 cached=False bytes=20",
            "status=200 cached=True bytes=20",
            "status=404 cached=False bytes=0",
            "decoded=Greeting(message='hello') error=None",
        ]

    def test_facade_decodes_before_the_session_closes(self, fast_config, capsys):
        with patch("requests.Session.close", autospec=True,
                   side_effect=lambda session: print("session closed")):
            run_demo("facade", fast_config)
        out = capsys.readouterr().out.splitlines()
        assert out[-2:] == ["decoded=Greeting(message='hello') error=None", "session closed"]

    def test_closures_output(self, fast_config, capsys):
        run_demo("closures", fast_config)
        out = capsys.readouterr().out
        assert "book sales for: 10.0" in out
        assert "book sales for: 13.0" in out
        assert "Executing operation 1" in out
        assert "Juggler named first DEINITIED" in out
        assert "strong capture outlives its owner: True" in out
        assert "weak capture outlives its owner: False" in out


class TestCli:
    """Test the console script."""

    def test_format_bytes(self):
        assert format_bytes(512) == "512.00 B"
        assert format_bytes(2048) == "2.00 KB"
        assert format_bytes(3 * 1024**3) == "3.00 GB"

    def test_no_arguments_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: patternbook" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        for name in demo_names():
            assert name in out

    def test_run_fast(self, capsys):
        assert main(["--run", "bridge", "--run", "observer", "--fast"]) == 0
        out = capsys.readouterr().out
        assert "Implementor2.start()" in out
        assert "The title will change to A Better Title" in out

    def test_unknown_demo_is_rejected(self):
        with pytest.raises(SystemExit):
            main(["--run", "singleton"])

    def test_category(self, capsys):
        assert main(["--category", "creational", "--fast"]) == 0
        assert "== Running builder ==" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--version"])
        assert "Patternbook v" in capsys.readouterr().out

    def test_info(self, capsys):
        with patch("patternbook.cli.psutil.cpu_count", return_value=4):
            assert main(["--info"]) == 0
        out = capsys.readouterr().out
        assert "Physical cores: 4" in out
        assert "Resident memory:" in out
