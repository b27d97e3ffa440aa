"""Core domain: time buckets, metric contract and rollup."""
