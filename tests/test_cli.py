from unittest.mock import MagicMock

import pytest

from org_chart.cli import start_cli
from org_chart.config import Settings
from tree_builder import BuildConfig


@pytest.fixture()
def settings(small_org):
    mock = MagicMock(spec=Settings)
    mock.build_config.return_value = BuildConfig(max_depth=5, max_total_nodes=50)
    mock.create_connector.return_value = small_org
    return mock


class TestDemo:
    def test_demo_prints_sample_chart(self, capsys):
        assert start_cli(["--demo"]) == 0
        out = capsys.readouterr().out
        assert out.startswith('digraph "Org Chart - Top O the World"')
        assert out.count("->") == 13

    def test_demo_writes_file(self, tmp_path, capsys):
        target = tmp_path / "graph.dot"

        assert start_cli(["--demo", "-o", str(target), "--title", "Sample"]) == 0

        assert target.read_text(encoding="utf-8").startswith('digraph "Sample"')
        assert "14 people" in capsys.readouterr().out

    def test_unwritable_output_exits_with_error(self, tmp_path, capsys):
        target = tmp_path / "missing" / "graph.dot"

        assert start_cli(["--demo", "-o", str(target)]) == 1

        assert not target.exists()
        assert "error: cannot write" in capsys.readouterr().err


class TestDirectoryBuild:
    def test_builds_from_directory(self, settings, small_org, capsys):
        assert start_cli(["ceo", "--max-depth", "4"], settings=settings) == 0

        settings.build_config.assert_called_once_with(max_depth=4, max_total_nodes=None)
        assert small_org.calls[0] == "ceo"
        assert small_org.connected is False
        out = capsys.readouterr().out
        assert '"ceo" -> "cfo"' in out
        assert "Alice Chief" in out

    def test_errors_are_reported_verbatim(self, settings, capsys):
        assert start_cli(["nobody"], settings=settings) == 1
        assert "error: nobody not found" in capsys.readouterr().err

    def test_malformed_directory_uri_exits_with_error(self, capsys):
        settings = Settings(
            directory_uri="ldaps://dc.corp:63x6",
            directory_username="svc",
            directory_password="secret",
            search_depth=3,
            max_users=10,
        )

        assert start_cli(["jdoe"], settings=settings) == 1
        assert "error: bind as svc failed" in capsys.readouterr().err

    def test_user_is_required_without_demo(self, settings):
        with pytest.raises(SystemExit) as info:
            start_cli([], settings=settings)
        assert info.value.code == 2


class TestSettings:
    def test_build_config_maps_fields(self):
        settings = Settings(
            search_depth=3,
            max_users=20,
            search_field_image="thumbnailPhoto",
            search_field_alt_names=["cn"],
        )

        config = settings.build_config(max_depth=6, max_total_nodes=None)

        assert config.max_depth == 6
        assert config.max_total_nodes == 20
        assert config.image_field == "thumbnailPhoto"
        assert config.search_fields == ["cn", "sAMAccountName"]

    def test_create_connector_picks_backend(self):
        from directory_connector import LdapDirectory, Neo4jDirectory

        ldap = Settings(directory_backend="ldap", ldap_base_dn="DC=corp").create_connector()
        neo4j = Settings(directory_backend="neo4j", directory_uri="bolt://localhost:7687").create_connector()

        assert isinstance(ldap._directory, LdapDirectory)
        assert isinstance(neo4j._directory, Neo4jDirectory)
