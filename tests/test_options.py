import click
import pytest
from click.testing import CliRunner

from cre8ors_deployment.options import (
    chain_option,
    cre8ors_address_option,
    presale_merkle_root_option,
    retries_option,
)
from cre8ors_deployment.types import Bytes32, ChecksumAddress
from tests.conftest import MERKLE_ROOT, address


@click.command()
@chain_option
@retries_option
@cre8ors_address_option
@presale_merkle_root_option
def show(chain, retries, cre8ors_address, presale_merkle_root):
    click.echo(f"chain={chain}")
    click.echo(f"retries={retries}")
    click.echo(f"cre8ors_address={cre8ors_address}")
    click.echo(f"presale_merkle_root={presale_merkle_root.hex()}")


def test_retries_must_allow_an_attempt(clean_environ, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    args = ["--chain", "local", "--retries", "0"]
    args += ["--cre8ors-address", address(7), "--presale-merkle-root", "ab" * 32]

    result = CliRunner().invoke(show, args)

    assert result.exit_code == 2
    assert "x>=1" in result.output


def test_checksum_address():
    lowercase = address(0xABCDEF).lower()
    assert ChecksumAddress().convert(lowercase, None, None) == address(0xABCDEF)
    with pytest.raises(click.BadParameter, match="not an ethereum address"):
        ChecksumAddress().convert("0x1234", None, None)


def test_bytes32():
    assert Bytes32().convert("0x" + "ab" * 32, None, None) == MERKLE_ROOT
    assert Bytes32().convert("ab" * 32, None, None) == MERKLE_ROOT
    assert Bytes32().convert(MERKLE_ROOT, None, None) == MERKLE_ROOT
    with pytest.raises(click.BadParameter, match="expected 32"):
        Bytes32().convert("0xabcd", None, None)
    with pytest.raises(click.BadParameter, match="not a hex string"):
        Bytes32().convert("merkle", None, None)


def test_options_read_chain_environment(clean_environ, tmp_path, monkeypatch):
    (tmp_path / ".env.goerli").write_text(
        f"CRE8ORS_ADDRESS={address(7)}\n"
        f"PRESALE_MERKLE_ROOT=0x{'ab' * 32}\n"
        "DEPLOY_RETRIES=5\n"
    )
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(show, ["--chain", "goerli"])

    assert result.exit_code == 0, result.output
    assert "chain=goerli" in result.output
    assert "retries=5" in result.output
    assert f"cre8ors_address={address(7)}" in result.output
    assert f"presale_merkle_root={'ab' * 32}" in result.output


def test_command_line_overrides_environment(clean_environ, tmp_path, monkeypatch):
    (tmp_path / ".env.goerli").write_text(
        f"CRE8ORS_ADDRESS={address(7)}\nPRESALE_MERKLE_ROOT=0x{'ab' * 32}\n"
    )
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(
        show, ["--chain", "goerli", "--cre8ors-address", address(8).lower()]
    )

    assert result.exit_code == 0, result.output
    assert "retries=2" in result.output
    assert f"cre8ors_address={address(8)}" in result.output


def test_missing_environment_file_is_reported(clean_environ, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(show, ["--chain", "mainnet"])
    assert result.exit_code != 0
    assert isinstance(result.exception, FileNotFoundError)
