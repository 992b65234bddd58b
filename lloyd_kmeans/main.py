# main.py
from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from lloyd_kmeans.config import LloydConfig
from lloyd_kmeans.core.lloyd import KMeansLloyd
from lloyd_kmeans.data.dataset import Dataset
from lloyd_kmeans.data.points import is_signed_numeric
from lloyd_kmeans.data.validation import validate_dataset
from lloyd_kmeans.metrics.metrics import cluster_sizes, inertia
from lloyd_kmeans.utils.logging import PrefixedLogger, format_run_prefix, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lloyd-kmeans",
        description="Кластеризация точек из файла: k-means++ и итерации Ллойда.",
    )
    parser.add_argument("points", type=str, help="Файл с точками, по одной на строку.")
    parser.add_argument(
        "-k",
        "--clusters",
        type=int,
        required=True,
        help="Число кластеров K.",
    )
    parser.add_argument(
        "--max-iter",
        type=int,
        default=100,
        help="Предельное число итераций Ллойда.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed генератора k-means++; без него берётся энтропия системы.",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.0,
        help="Порог сдвига центров для остановки.",
    )
    parser.add_argument(
        "--dtype",
        type=str,
        default="float64",
        help="Скалярный тип координат (float32, float64, int32, int64, ...).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Логировать итерации.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger = setup_logger(logging.INFO if args.verbose else logging.WARNING)

    config = LloydConfig(
        n_clusters=args.clusters,
        max_iter=args.max_iter,
        seed=args.seed,
        epsilon=args.epsilon,
    )
    try:
        config.validate()
        if not is_signed_numeric(args.dtype):
            raise TypeError(f"dtype must be a signed numeric type, got {args.dtype}")
        dataset = Dataset(args.points, dtype=args.dtype)
        validate_dataset(dataset)
    except (TypeError, ValueError, OSError) as exc:
        logger.error(str(exc))
        return 2

    X = dataset.X
    prefix = format_run_prefix(X.shape[0], X.shape[1], config.n_clusters)

    model = KMeansLloyd(
        n_clusters=config.n_clusters,
        n_iters=config.max_iter,
        epsilon=config.epsilon,
        seed=config.seed,
        logger=PrefixedLogger(logger, prefix),
    )
    try:
        model.fit(X)
    except ValueError as exc:
        logger.error(f"{prefix} {exc}")
        return 2

    logger.info(
        f"{prefix} Done: iterations={model.n_iters_actual}, "
        f"converged={model.converged}, T_init={model.t_init:.6f}s, "
        f"T_iter={model.t_iter_total:.6f}s"
    )

    result = {
        "means": model.centroids.tolist(),
        "labels": model.labels.tolist(),
        "iterations": model.n_iters_actual,
        "converged": model.converged,
        "inertia": inertia(X, model.centroids, model.labels),
        "cluster_sizes": cluster_sizes(model.labels, config.n_clusters),
    }
    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
