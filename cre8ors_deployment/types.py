import click
from eth_utils import is_address, is_hex, to_bytes, to_checksum_address


class ChecksumAddress(click.ParamType):
    """An ethereum address, normalized to its EIP-55 checksummed form."""

    name = "address"

    def convert(self, value, param, ctx):
        if not is_address(value):
            self.fail(f"{value} is not an ethereum address", param, ctx)
        return to_checksum_address(value)


class Bytes32(click.ParamType):
    """A 32 byte value such as a merkle root, given as hex."""

    name = "bytes32"

    def convert(self, value, param, ctx):
        if isinstance(value, bytes):
            data = value
        elif is_hex(value):
            data = to_bytes(hexstr=value)
        else:
            self.fail(f"{value} is not a hex string", param, ctx)
        if len(data) != 32:
            self.fail(f"{value} is {len(data)} bytes long; expected 32", param, ctx)
        return data
