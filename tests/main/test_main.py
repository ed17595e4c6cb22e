"""Tests for the command-line entry point."""

import logging

import pytest

from main import build_parser, main, mark_positional_numbers, setup_logging
from services.coordinate_converter import CoordinateConverter
from shared.constants import EXIT_INTERNAL_ERROR, EXIT_INVALID_INPUT, EXIT_OK
from shared.exceptions import ConversionError

SCENARIO_OUTPUT = (
    'Lon, lat: -99.09358, 19.29676\n'
    'Lat/lon: 19.29676/-99.09358\n'
    '14N 490168 2133666\n'
    '14/033113131312\n'
)


@pytest.fixture(autouse=True)
def _no_user_config(isolated_config):
    """Every CLI test runs without a real config file and restores logging."""
    yield isolated_config
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)


class TestMain:
    def test_lonlat(self, capsys):
        assert main(['-99.09357951534054', '19.29675919163688']) == EXIT_OK
        assert capsys.readouterr().out == SCENARIO_OUTPUT

    def test_mgs(self, capsys):
        assert main(['14/033113131312']) == EXIT_OK
        assert capsys.readouterr().out.endswith('14/033113131312\n')

    def test_utm(self, capsys):
        assert main(['14N', '490168.5', '2133666.5']) == EXIT_OK
        assert '14N 490168 2133666' in capsys.readouterr().out

    def test_out_of_range_longitude(self, capsys):
        assert main(['200.0', '0']) == EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Not a geographically sensible' in captured.err

    def test_short_mgs_key(self, capsys):
        assert main(['14/03311313131']) == EXIT_INVALID_INPUT
        assert 'length 11' in capsys.readouterr().err

    def test_zone_99(self, capsys):
        assert main(['99N', '500000', '0']) == EXIT_INVALID_INPUT
        assert '99N' in capsys.readouterr().err

    def test_wrong_argument_count(self, capsys):
        assert main(['1', '2', '3', '4']) == EXIT_INVALID_INPUT
        assert 'but got 4' in capsys.readouterr().err

    def test_negative_exponent_longitude(self, capsys):
        assert main(['-1e-5', '0']) == EXIT_OK
        assert capsys.readouterr().out.startswith('Lon, lat: -0.00001, 0.00000\n')

    def test_negative_exponent_after_option(self, capsys):
        assert main(['--log-level', 'warning', '31N', '-2.5e2', '-1e3']) == EXIT_OK

    def test_unknown_option_is_invalid_input(self, capsys):
        assert main(['--frobnicate', '1.0', '2.0']) == EXIT_INVALID_INPUT
        assert 'unrecognized arguments' in capsys.readouterr().err

    def test_missing_coordinates_is_invalid_input(self, capsys):
        assert main([]) == EXIT_INVALID_INPUT

    def test_conversion_fault(self, capsys, monkeypatch):
        def _boom(self, coord):
            raise ConversionError('proj exploded')

        monkeypatch.setattr(CoordinateConverter, 'convert', _boom)
        assert main(['1.0', '2.0']) == EXIT_INTERNAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Internal error: proj exploded' in captured.err

    def test_log_level_override(self, capsys):
        assert main(['--log-level', 'debug', '1.0', '2.0']) == EXIT_OK
        assert logging.getLogger().level == logging.DEBUG

    def test_bad_log_level(self, capsys):
        assert main(['--log-level', 'loud', '1.0', '2.0']) == EXIT_INVALID_INPUT

    def test_missing_config_file(self, capsys, tmp_path):
        missing = tmp_path / 'nope.toml'
        assert main(['--config', str(missing), '1.0', '2.0']) == EXIT_INVALID_INPUT
        assert 'Config file not found' in capsys.readouterr().err

    def test_config_log_file(self, capsys, tmp_path):
        log_file = tmp_path / 'mgsconv.log'
        config = tmp_path / 'config.toml'
        config.write_text(
            f'[logging]\nlevel = "INFO"\nfile = "{log_file.as_posix()}"\n',
            encoding='utf-8',
        )
        assert main(['--config', str(config), '47/122021022203']) == EXIT_OK
        logging.shutdown()
        assert 'zone 48' in log_file.read_text(encoding='utf-8')


class TestParser:
    def test_negative_numbers_are_positional(self):
        args = build_parser().parse_args(['-99.5', '-19.25'])
        assert args.coords == ['-99.5', '-19.25']

    def test_exponent_negatives_get_separator(self):
        argv = mark_positional_numbers(['-1e-5', '-inf'])
        assert argv == ['--', '-1e-5', '-inf']
        assert build_parser().parse_args(argv).coords == ['-1e-5', '-inf']

    def test_option_values_are_left_alone(self):
        argv = ['--log-level', 'debug', '14N', '-1e3', '5']
        assert mark_positional_numbers(argv) == [
            '--log-level', 'debug', '14N', '--', '-1e3', '5'
        ]

    def test_options_without_negatives_unchanged(self):
        argv = ['--config', 'c.toml', '1.0', '2.0']
        assert mark_positional_numbers(argv) == argv

    def test_help_mentions_conventions(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(['--help'])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert 'canonical zone' in out
        assert '14/033113131312' in out


class TestSetupLogging:
    def test_file_handler(self, tmp_path):
        log_file = tmp_path / 'out.log'
        setup_logging('INFO', str(log_file))
        logging.getLogger('mgsconv.test').info('hello')
        logging.shutdown()
        assert 'hello' in log_file.read_text(encoding='utf-8')
