"""
End-to-end tests for the tune2abc command line
"""

import json

from tune2abc.cli import main


class TestMissingInput:

    def test_no_input_flag(self, capsys):
        assert main([]) == 1
        err = capsys.readouterr().err
        assert 'Please provide an input file with the -input flag' in err
        assert 'usage:' in err

    def test_input_file_not_found(self, tmp_path, capsys):
        assert main(['-input', str(tmp_path / 'missing.json')]) == 1
        assert 'Error reading file' in capsys.readouterr().err


class TestMultiFileMode:

    def test_writes_files(self, tmp_path, write_json, two_tunes, capsys):
        out_dir = tmp_path / 'abc'
        status = main(['-input', str(write_json(two_tunes)), '-output', str(out_dir)])

        assert status == 0
        assert sorted(p.name for p in out_dir.iterdir()) == ['1_A.abc', '2_B.abc']
        out = capsys.readouterr().out
        assert 'Found 2 tunes in the input file' in out
        assert f'Created output directory: {out_dir}' in out

    def test_double_dash_aliases(self, tmp_path, write_json, two_tunes):
        out_dir = tmp_path / 'abc'
        assert main(['--input', str(write_json(two_tunes)), '--output', str(out_dir)]) == 0
        assert (out_dir / '1_A.abc').exists()

    def test_malformed_input_writes_nothing(self, tmp_path, capsys):
        bad = tmp_path / 'bad.json'
        bad.write_text('{"not": "an array"}')
        out_dir = tmp_path / 'abc'

        assert main(['-input', str(bad), '-output', str(out_dir)]) == 1
        assert not out_dir.exists()
        assert 'Error:' in capsys.readouterr().err

    def test_output_dir_blocked(self, tmp_path, write_json, two_tunes):
        blocker = tmp_path / 'blocker'
        blocker.write_text('x')
        assert main(['-input', str(write_json(two_tunes)), '-output', str(blocker)]) == 1


class TestSingleFileMode:

    def test_default_outfile(self, tmp_path, write_json, two_tunes):
        status = main(['-input', str(write_json(two_tunes)),
                       '-output', str(tmp_path), '-single'])
        assert status == 0
        text = (tmp_path / 'all_tunes.abc').read_text(encoding='utf-8')
        assert text.index('X:1') < text.index('X:2')
        assert 'GAB cde|\n\nX:2' in text

    def test_custom_outfile_relative_to_output(self, tmp_path, write_json, two_tunes):
        out_dir = tmp_path / 'abc'
        main(['-input', str(write_json(two_tunes)), '-output', str(out_dir),
              '-single', '-outfile', 'session.abc'])
        assert (out_dir / 'session.abc').exists()


class TestConfigFile:

    def test_settings_from_yaml(self, tmp_path, write_json, two_tunes):
        input_path = write_json(two_tunes)
        config = tmp_path / 'convert.yaml'
        config.write_text(
            f'input: {input_path}\noutput: {tmp_path / "from-config"}\nsingle: true\n'
        )
        assert main(['-config', str(config)]) == 0
        assert (tmp_path / 'from-config' / 'all_tunes.abc').exists()

    def test_flags_override_config(self, tmp_path, write_json, two_tunes):
        input_path = write_json(two_tunes)
        config = tmp_path / 'convert.yaml'
        config.write_text(f'input: {input_path}\noutput: {tmp_path / "from-config"}\n')

        assert main(['-config', str(config), '-output', str(tmp_path / 'flag')]) == 0
        assert (tmp_path / 'flag' / '1_A.abc').exists()
        assert not (tmp_path / 'from-config').exists()

    def test_multi_overrides_single_in_config(self, tmp_path, write_json, two_tunes):
        input_path = write_json(two_tunes)
        out_dir = tmp_path / 'abc'
        config = tmp_path / 'convert.yaml'
        config.write_text(f'input: {input_path}\noutput: {out_dir}\nsingle: true\n')

        assert main(['-config', str(config), '-multi']) == 0
        assert (out_dir / '1_A.abc').exists()
        assert not (out_dir / 'all_tunes.abc').exists()

    def test_non_string_config_value_is_fatal(self, tmp_path, capsys):
        config = tmp_path / 'convert.yaml'
        config.write_text('input: 123\n')
        assert main(['-config', str(config)]) == 1
        assert 'must be a string' in capsys.readouterr().err

    def test_bad_config_is_fatal(self, tmp_path, capsys):
        config = tmp_path / 'convert.yaml'
        config.write_text('colour: blue\n')
        assert main(['-config', str(config)]) == 1
        assert 'Unknown keys' in capsys.readouterr().err


class TestReport:

    def test_report_written(self, tmp_path, write_json, two_tunes):
        report = tmp_path / 'report.json'
        out_dir = tmp_path / 'abc'
        main(['-input', str(write_json(two_tunes)), '-output', str(out_dir),
              '-report', str(report)])

        data = json.loads(report.read_text())
        assert data['mode'] == 'multi'
        assert data['total'] == 2
        assert data['written'] == 2
        assert data['failed'] == []
