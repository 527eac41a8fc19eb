"""
System tests for the command-line interface.
"""

import pytest

from meetcheck.cli import EXIT_ERRORS, EXIT_NO_FILES, EXIT_OK, find_config_files, main


@pytest.mark.system
def test_clean_file_exits_zero(write_config, valid_config_text, capsys):
    path = write_config(valid_config_text)

    assert main([str(path)]) == EXIT_OK

    out = capsys.readouterr().out
    assert 'Checked 1 file(s): 0 error(s), 0 warning(s)' in out


@pytest.mark.system
def test_errors_are_rendered(write_config, valid_config_text, capsys):
    path = write_config(valid_config_text + '\n[foo]\n')

    assert main([str(path)]) == EXIT_ERRORS

    out = capsys.readouterr().out
    assert str(path) in out
    assert "Error: Unknown section 'foo'" in out
    assert '1 error(s)' in out


@pytest.mark.system
def test_directory_is_searched(write_config, valid_config_text, tmp_path, capsys):
    write_config(valid_config_text, subdir='uspa')
    write_config('this is not toml\n', subdir='ipf')

    assert main([str(tmp_path)]) == EXIT_ERRORS

    out = capsys.readouterr().out
    assert 'Error parsing TOML file' in out
    assert 'Checked 2 file(s): 1 error(s)' in out


@pytest.mark.system
def test_no_files_found(tmp_path, capsys):
    assert main([str(tmp_path)]) == EXIT_NO_FILES
    assert 'No CONFIG.toml files found' in capsys.readouterr().out


@pytest.mark.system
def test_find_config_files_sorted_and_unique(write_config, valid_config_text, tmp_path):
    b = write_config(valid_config_text, subdir='b')
    a = write_config(valid_config_text, subdir='a')

    assert find_config_files([str(tmp_path), str(a)]) == [a, b]
