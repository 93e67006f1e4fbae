import os
from dotenv import load_dotenv

# Charge le .env local (utile pour dev/local)
load_dotenv()

# --- INDEXEUR & PASSERELLE IPFS ---
TZKT_BASE_URL = os.getenv("TZKT_BASE_URL", "https://api.tzkt.io/v1")
IPFS_GATEWAY_URL = os.getenv("IPFS_GATEWAY_URL", "https://ipfs.io/ipfs")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# --- COLLECTION ---
# GOGOs on Tezos
TOKEN_CONTRACT = os.getenv("TOKEN_CONTRACT", "KT1SyPgtiXTaEfBuMZKviWGNHqVrBBEjvtfQ")
# Nominal size of the collection, used as the rarity denominator even when
# the indexer returns fewer tokens.
COLLECTION_TOTAL = int(os.getenv("COLLECTION_TOTAL", "5555"))
CATALOG_LIMIT = int(os.getenv("CATALOG_LIMIT", "10000"))

# --- CACHE ---
CACHE_DIR = os.getenv("CACHE_DIR", "ipfs_cache")
CACHE_PREFIX = os.getenv("CACHE_PREFIX", "gogo")
REFETCH_DELAY = float(os.getenv("REFETCH_DELAY", "1.0"))

# --- RAPPORTS CSV ---
OUTPUT_DIR = os.getenv("OUTPUT_DIR", ".")
ID_PADDING = int(os.getenv("ID_PADDING", "4"))
RANK_REPORT_FILE = os.getenv("RANK_REPORT_FILE", "gogos-by-rank.csv")
ID_REPORT_FILE = os.getenv("ID_REPORT_FILE", "gogos-by-id.csv")
ATTRIBUTE_REPORT_FILE = os.getenv("ATTRIBUTE_REPORT_FILE", "gogos-attributes.csv")

# --- PARAMÈTRES D'EXÉCUTION ---
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
