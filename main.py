"""Calculate rarity scores and ranks for a Tezos collection and export them as CSV."""

from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from tqdm import tqdm

import config
from clients import IPFSClient, TzktClient
from nft.aggregator import AttributeAggregator, FrequencyTable
from nft.cache import MetadataCache
from nft.models import CatalogEntry, RankedToken, Token
from nft.ranking import rank_by_id, rank_by_score
from nft.rarity_calculator import compute_percentages, compute_scores, score_tokens
from nft.report import write_attribute_report, write_id_report, write_rank_report

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)


@dataclass
class RarityResult:
    tokens: List[Token]
    frequencies: FrequencyTable
    scores: Dict[Tuple[str, str], float]
    percentages: Dict[Tuple[str, str], float]
    by_rank: List[RankedToken]
    by_id: List[RankedToken]


def collect_tokens(
    catalog: Sequence[CatalogEntry], cache: MetadataCache
) -> Tuple[List[Token], FrequencyTable]:
    """Resolve every token in id order and tally its attributes.

    Returns once the whole collection has been aggregated.
    """
    aggregator = AttributeAggregator()
    tokens: List[Token] = []
    for entry in tqdm(sorted(catalog, key=lambda e: e.token_id), desc="tokens", unit="token"):
        document = cache.load_or_fetch(entry)
        token = Token.from_metadata(entry.token_id, document)
        aggregator.record_token(token)
        tokens.append(token)
    return tokens, aggregator.finalize()


def _trait_label(key: Tuple[str, str]) -> str:
    return f"{key[0]} - {key[1]}"


def _log_debug_summary(result: RarityResult) -> None:
    if not logging.getLogger().isEnabledFor(logging.DEBUG):
        return
    logging.debug("Attribute Counts %s", json.dumps(result.frequencies.counts, default=dict))
    logging.debug(
        "Attribute Rarity Scores %s",
        json.dumps({_trait_label(k): v for k, v in result.scores.items()}),
    )
    logging.debug(
        "Attribute Rarity Percentages %s",
        json.dumps({_trait_label(k): v for k, v in result.percentages.items()}),
    )
    logging.debug(
        "Tokens (By rank) %s",
        json.dumps([{"rank": e.rank, "id": e.token.id, "score": e.token.score} for e in result.by_rank]),
    )


def run_rarity_pipeline(
    catalog_client: TzktClient,
    cache: MetadataCache,
    contract: str = config.TOKEN_CONTRACT,
    collection_total: int = config.COLLECTION_TOTAL,
    output_dir: str = config.OUTPUT_DIR,
    id_padding: int = config.ID_PADDING,
    attribute_report: bool = False,
    catalog_limit: int = config.CATALOG_LIMIT,
) -> RarityResult:
    """Load, score, rank and export the whole collection."""
    catalog = catalog_client.fetch_token_catalog(contract, limit=catalog_limit)
    tokens, frequencies = collect_tokens(catalog, cache)
    if len(tokens) != collection_total:
        logging.warning(
            "Resolved %d tokens but scoring against a collection total of %d",
            len(tokens),
            collection_total,
        )

    scores = compute_scores(frequencies, collection_total)
    percentages = compute_percentages(frequencies, collection_total)
    score_tokens(tokens, scores)
    by_rank = rank_by_score(tokens)
    by_id = rank_by_id(by_rank)

    result = RarityResult(tokens, frequencies, scores, percentages, by_rank, by_id)
    _log_debug_summary(result)

    write_id_report(by_id, os.path.join(output_dir, config.ID_REPORT_FILE), id_padding)
    write_rank_report(by_rank, os.path.join(output_dir, config.RANK_REPORT_FILE), id_padding)
    if attribute_report:
        write_attribute_report(
            frequencies, scores, percentages, os.path.join(output_dir, config.ATTRIBUTE_REPORT_FILE)
        )
    logging.info("Ranked %d tokens", len(by_rank))
    return result


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute NFT rarity scores and ranks")
    parser.add_argument("--contract", default=config.TOKEN_CONTRACT, help="Token contract address")
    parser.add_argument(
        "--collection-total",
        type=int,
        default=config.COLLECTION_TOTAL,
        help="Nominal collection size used as the rarity denominator",
    )
    parser.add_argument("--cache-dir", default=config.CACHE_DIR, help="Metadata cache directory")
    parser.add_argument("--output-dir", default=config.OUTPUT_DIR, help="Directory for CSV reports")
    parser.add_argument(
        "--id-padding",
        type=int,
        default=config.ID_PADDING,
        help="Zero-pad token ids to this many digits (0 disables padding)",
    )
    parser.add_argument(
        "--attributes-report", action="store_true", help="Also export per-attribute rarity"
    )
    parser.add_argument("--debug", action="store_true", default=config.DEBUG, help="Verbose output")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    catalog_client = TzktClient(config.TZKT_BASE_URL, timeout=config.REQUEST_TIMEOUT)
    resolver = IPFSClient(config.IPFS_GATEWAY_URL, timeout=config.REQUEST_TIMEOUT)
    cache = MetadataCache(
        args.cache_dir,
        resolver,
        prefix=config.CACHE_PREFIX,
        refetch_delay=config.REFETCH_DELAY,
    )
    run_rarity_pipeline(
        catalog_client,
        cache,
        contract=args.contract,
        collection_total=args.collection_total,
        output_dir=args.output_dir,
        id_padding=args.id_padding,
        attribute_report=args.attributes_report,
    )


if __name__ == "__main__":
    main()
