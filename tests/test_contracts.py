import pytest

from nft_marketplace.contracts import (
    CONTRACT_WRAPPERS,
    MarketplaceContract,
    NFTContract,
    get_wrapper,
)

from .conftest import MARKETPLACE_ARTIFACT, NFT_ARTIFACT


def test_wrappers_load_their_artifacts(artifacts_dir):
    nft = NFTContract()
    marketplace = MarketplaceContract()

    assert nft.abi == NFT_ARTIFACT["abi"]
    assert nft.bytecode == NFT_ARTIFACT["bytecode"]
    assert marketplace.abi == MARKETPLACE_ARTIFACT["abi"]
    assert marketplace.bytecode == MARKETPLACE_ARTIFACT["bytecode"]


def test_wrapper_needs_compiled_artifact(empty_artifacts_dir):
    with pytest.raises(FileNotFoundError):
        MarketplaceContract()


def test_nft_takes_no_constructor_arguments(artifacts_dir):
    nft = NFTContract()

    assert nft.encode_constructor_params() == []
    with pytest.raises(ValueError, match="no arguments"):
        nft.encode_constructor_params(1)


def test_marketplace_fee_percent(artifacts_dir):
    marketplace = MarketplaceContract()

    assert marketplace.encode_constructor_params(1) == [1]
    assert marketplace.encode_constructor_params(0) == [0]
    assert marketplace.encode_constructor_params(100) == [100]


@pytest.mark.parametrize("params", [(), (1, 2)])
def test_marketplace_requires_exactly_one_argument(artifacts_dir, params):
    with pytest.raises(ValueError, match="exactly one argument"):
        MarketplaceContract().encode_constructor_params(*params)


@pytest.mark.parametrize("fee_percent", ["1", 1.0, True, None])
def test_marketplace_fee_percent_must_be_integer(artifacts_dir, fee_percent):
    with pytest.raises(ValueError, match="must be an integer"):
        MarketplaceContract().encode_constructor_params(fee_percent)


@pytest.mark.parametrize("fee_percent", [-1, 101])
def test_marketplace_fee_percent_range(artifacts_dir, fee_percent):
    with pytest.raises(ValueError, match="between 0 and 100"):
        MarketplaceContract().encode_constructor_params(fee_percent)


def test_get_deployment_data(artifacts_dir):
    data = MarketplaceContract().get_deployment_data(1)

    assert data == {
        "bytecode": MARKETPLACE_ARTIFACT["bytecode"],
        "abi": MARKETPLACE_ARTIFACT["abi"],
        "constructor_args": [1],
        "contract_name": "Marketplace",
    }


def test_get_wrapper():
    assert get_wrapper("NFT") is NFTContract
    assert get_wrapper("Marketplace") is MarketplaceContract
    assert set(CONTRACT_WRAPPERS) == {"NFT", "Marketplace"}

    with pytest.raises(ValueError, match="Unknown contract: Token"):
        get_wrapper("Token")
