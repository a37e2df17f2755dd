"""
Pytest configuration and shared fixtures

Reference transaction: 2 inputs, 2 outputs, version 1, locktime 0.
"""

import pytest

from txdecode.config.decoder_config import DecoderConfig

SAMPLE_TX_HEX = (
    "010000000242d5c1d6f7308bbe95c0f6e1301dd73a8da77d2155b0773bc297ac47f9cd7380"
    "010000006a4730440220771361aae55e84496b9e7b06e0a53dd122a1425f85840af7a52b20fa"
    "329816070220221dd92132e82ef9c133cb1a106b64893892a11acf2cfa1adb7698dcdc02f01b"
    "0121030077be25dc482e7f4abad60115416881fe4ef98af33c924cd8b20ca4e57e8bd5feffff"
    "ff75c87cc5f3150eefc1c04c0246e7e0b370e64b17d6226c44b333a6f4ca14b49c000000006b"
    "483045022100e0d85fece671d367c8d442a96230954cdda4b9cf95e9edc763616d05d93e9443"
    "02202330d520408d909575c5f6976cc405b3042673b601f4f2140b2e4d447e671c47012103c4"
    "3afccd37aae7107f5a43f5b7b223d034e7583b77c8cd1084d86895a7341abffeffffff02ebb1"
    "0f00000000001976a9144ef88a0b04e3ad6d1888da4be260d6735e0d308488ac508c1e000000"
    "000017a91476c0c8f2fc403c5edaea365f6a284317b9cdf7258700000000"
)

SAMPLE_TXID = "3c1804567a336c3944e30b3c2593970bfcbf5b15a40f4fc6b626a360ee0507f2"

# version 1, no inputs, no outputs, locktime 0
EMPTY_TX_HEX = "01000000" "00" "00" "00000000"


@pytest.fixture
def sample_tx_hex():
    """Raw hex of the reference 2-in/2-out transaction."""
    return SAMPLE_TX_HEX


@pytest.fixture
def sample_tx_bytes():
    return bytes.fromhex(SAMPLE_TX_HEX)


@pytest.fixture
def sample_txid():
    """Known display txid of the reference transaction."""
    return SAMPLE_TXID


@pytest.fixture
def decoder_config():
    """Lenient default config, independent of the environment."""
    return DecoderConfig(
        strict_compact_size=False,
        reject_trailing_bytes=False,
        json_indent=2,
        log_level="INFO",
        log_mode="development",
        log_dir=None,
    )
