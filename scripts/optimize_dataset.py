#!/usr/bin/env python3
"""Build the reduced boundary dataset used when GEOPLACES_USE_OPTIMIZED is on.

Reads the full dataset from --data-dir, keeps only the target countries and
writes the result to <data-dir>/optimized/. With --bucket the reduced files
are uploaded to S3 instead.

Usage:
    python3 scripts/optimize_dataset.py --data-dir data
    python3 scripts/optimize_dataset.py --data-dir data --countries US CA --bucket my-bucket
"""

import argparse
import logging
import sys

from geoplaces.config import (
    ADMIN1_FILE,
    CONTINENTS_FILE,
    COUNTRIES_FILE,
    REGIONS_FILE,
    TARGET_COUNTRIES,
    TARGET_COUNTRIES_A3,
)
from geoplaces.data_loader import DatasetLoader
from geoplaces.optimizer import (
    build_optimized_dataset,
    publish_optimized_dataset,
    write_optimized_dataset,
)
from geoplaces.s3_io import S3IO


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--data-dir', required=True, help='Root of the full dataset')
    parser.add_argument('--countries', nargs='+', default=TARGET_COUNTRIES,
                        help='Alpha-2 codes to keep')
    parser.add_argument('--countries-a3', nargs='+', default=None,
                        help='Alpha-3 codes to keep (defaults to those of --countries)')
    parser.add_argument('--bucket', help='Upload to this S3 bucket instead of writing locally')
    parser.add_argument('--prefix', default='', help='S3 key prefix')
    return parser.parse_args(argv)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    args = parse_args(argv)

    countries_a3 = args.countries_a3
    if countries_a3 is None:
        if args.countries == TARGET_COUNTRIES:
            countries_a3 = TARGET_COUNTRIES_A3
        else:
            countries_a3 = []

    loader = DatasetLoader(data_dir=args.data_dir)
    print(f"Optimizing dataset for countries: {', '.join(args.countries)}")

    documents = build_optimized_dataset(
        admin1=loader.load_json(ADMIN1_FILE),
        countries=loader.load_json(COUNTRIES_FILE),
        continents=loader.load_json(CONTINENTS_FILE),
        regions=loader.load_json(REGIONS_FILE),
        countries_a2=args.countries,
        countries_a3=countries_a3,
    )

    if args.bucket:
        publish_optimized_dataset(documents, S3IO(bucket=args.bucket, prefix=args.prefix))
        print(f"Uploaded optimized dataset to s3://{args.bucket}/{args.prefix}")
    else:
        write_optimized_dataset(documents, args.data_dir)
        print(f"Optimized dataset saved to {args.data_dir}/optimized")
    return 0


if __name__ == '__main__':
    sys.exit(main())
