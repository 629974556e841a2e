"""Changes domain for merging per-version changelog files into aggregates."""

# Note: Imports are not done at module level to avoid circular dependencies.
# Import directly from submodules when needed:
#   from allchanges.changes.aggregator import ChangesAggregator
#   from allchanges.changes.versions import VersionRange, sort_versions
