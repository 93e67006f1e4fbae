from utils import bytes_to_str, ipfs_to_gateway


def test_bytes_to_str_decodes_hex():
    assert bytes_to_str("697066733a2f2f516d416263") == "ipfs://QmAbc"
    assert bytes_to_str("0x697066733a2f2f516d416263") == "ipfs://QmAbc"


def test_ipfs_to_gateway_rewrites_scheme():
    assert ipfs_to_gateway("ipfs://QmAbc/1.json", "https://ipfs.io/ipfs/") == "https://ipfs.io/ipfs/QmAbc/1.json"


def test_ipfs_to_gateway_leaves_http_uris():
    assert ipfs_to_gateway("https://example.com/1.json", "https://ipfs.io/ipfs") == "https://example.com/1.json"
