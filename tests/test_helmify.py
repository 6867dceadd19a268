"""
Tests for the optional helmify runner
"""
import subprocess

import pytest

from helm_gen import helmify


@pytest.fixture
def preprocessed_file(tmp_path):
    path = tmp_path / 'all.yaml'
    path.write_text('apiVersion: v1\nkind: Namespace\nmetadata:\n  name: ns\n')
    return path


class TestTryHelmify:
    """Test helmify discovery, invocation and fallback"""

    def test_not_installed(self, monkeypatch, preprocessed_file, tmp_path, capsys):
        monkeypatch.setattr(helmify.shutil, 'which', lambda name: None)

        assert helmify.try_helmify(preprocessed_file, tmp_path / 'out', 'chart') is False
        out = capsys.readouterr().out
        assert 'helmify not found' in out
        assert 'go install' in out

    def test_success(self, monkeypatch, preprocessed_file, tmp_path):
        calls = []

        def fake_run(cmd, stdin=None, check=False):
            calls.append((cmd, stdin.read(), check))
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(helmify, 'find_helmify', lambda: '/usr/local/bin/helmify')
        monkeypatch.setattr(helmify.subprocess, 'run', fake_run)

        output_dir = tmp_path / 'out'
        assert helmify.try_helmify(preprocessed_file, output_dir, 'chart') is True

        cmd, stdin_data, check = calls[0]
        assert cmd == ['/usr/local/bin/helmify', '-crd-dir', str(output_dir / 'chart')]
        assert stdin_data == preprocessed_file.read_bytes()
        assert check is True
        assert output_dir.is_dir()

    def test_non_zero_exit(self, monkeypatch, preprocessed_file, tmp_path, capsys):
        def fake_run(cmd, stdin=None, check=False):
            raise subprocess.CalledProcessError(1, cmd)

        monkeypatch.setattr(helmify, 'find_helmify', lambda: '/usr/local/bin/helmify')
        monkeypatch.setattr(helmify.subprocess, 'run', fake_run)

        assert helmify.try_helmify(preprocessed_file, tmp_path / 'out', 'chart') is False
        assert 'falling back' in capsys.readouterr().out

    def test_launch_failure(self, monkeypatch, preprocessed_file, tmp_path):
        def fake_run(cmd, stdin=None, check=False):
            raise PermissionError('not executable')

        monkeypatch.setattr(helmify, 'find_helmify', lambda: '/usr/local/bin/helmify')
        monkeypatch.setattr(helmify.subprocess, 'run', fake_run)

        assert helmify.try_helmify(preprocessed_file, tmp_path / 'out', 'chart') is False

    def test_output_dir_not_creatable(self, monkeypatch, preprocessed_file, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text('file')
        monkeypatch.setattr(helmify, 'find_helmify', lambda: '/usr/local/bin/helmify')

        assert helmify.try_helmify(preprocessed_file, blocker / 'out', 'chart') is False
