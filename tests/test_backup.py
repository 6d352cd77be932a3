"""Tests for BackupManager."""

from __future__ import annotations

import os
import re
import time

from envline.backup import BackupManager
from envline.config import BackupConfig, EnvlineConfig

_NAME_RE = re.compile(r"^\.env\.backup_\d{8}_\d{6}_[A-Za-z0-9]{8}$")


def _age(path, days):
    old = time.time() - days * 86400
    os.utime(path, (old, old))


def test_create_copies_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("A=1\n")
    manager = BackupManager(tmp_path / "backups")
    backup = manager.create(env)
    assert backup is not None
    assert _NAME_RE.match(backup.name)
    assert backup.read_text() == "A=1\n"


def test_create_missing_source_returns_none(tmp_path):
    manager = BackupManager(tmp_path / "backups")
    assert manager.create(tmp_path / ".env") is None
    assert not (tmp_path / "backups").exists()


def test_create_names_are_unique(tmp_path):
    env = tmp_path / ".env"
    env.write_text("A=1\n")
    manager = BackupManager(tmp_path / "backups")
    first = manager.create(env)
    second = manager.create(env)
    assert first != second
    assert len(manager.list_backups(".env")) == 2


def test_prune_removes_only_old_matching_backups(tmp_path):
    backups = tmp_path / "backups"
    backups.mkdir()
    old = backups / ".env.backup_20200101_000000_aaaaaaaa"
    fresh = backups / ".env.backup_20990101_000000_bbbbbbbb"
    other = backups / ".env.local.backup_20200101_000000_cccccccc"
    unrelated = backups / "notes.txt"
    for p in (old, fresh, other, unrelated):
        p.write_text("x")
    for p in (old, other, unrelated):
        _age(p, 30)

    removed = BackupManager(backups, retention_days=7).prune(".env")
    assert removed == [old]
    assert not old.exists()
    assert fresh.exists() and other.exists() and unrelated.exists()


def test_prune_skipped_without_retention(tmp_path):
    backups = tmp_path / "backups"
    backups.mkdir()
    old = backups / ".env.backup_20200101_000000_aaaaaaaa"
    old.write_text("x")
    _age(old, 30)
    assert BackupManager(backups, retention_days=0).prune(".env") == []
    assert BackupManager(backups, retention_days=None).prune(".env") == []
    assert old.exists()


def test_prune_missing_directory(tmp_path):
    assert BackupManager(tmp_path / "nope").prune(".env") == []


def test_create_prunes_old_backups(tmp_path):
    env = tmp_path / ".env"
    env.write_text("A=1\n")
    backups = tmp_path / "backups"
    backups.mkdir()
    old = backups / ".env.backup_20200101_000000_aaaaaaaa"
    old.write_text("x")
    _age(old, 10)
    BackupManager(backups, retention_days=7).create(env)
    assert not old.exists()


def test_list_backups_newest_first(tmp_path):
    backups = tmp_path / "backups"
    backups.mkdir()
    older = backups / ".env.backup_1"
    newer = backups / ".env.backup_2"
    older.write_text("x")
    newer.write_text("y")
    _age(older, 2)
    assert BackupManager(backups).list_backups(".env") == [newer, older]


def test_from_config(tmp_path):
    cfg = EnvlineConfig(
        backup=BackupConfig(path="bk", retention_days=3),
        config_path=tmp_path / ".envline.toml",
    )
    manager = BackupManager.from_config(cfg)
    assert manager.directory == tmp_path / "bk"
    assert manager.retention_days == 3
