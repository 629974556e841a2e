"""Aggregation of individual changelog files into a single aggregate document.

The pipeline is linear: locate the latest aggregate, parse it, scan individual
``CHANGES-<version>.md`` files on top of it, filter by version range, sort,
render, pick an output name and write. Problems with single files are logged
and skipped; only directory creation and the final write raise.
"""

from allchanges.changes.document import parse_aggregate, render_aggregate
from allchanges.changes.models import AggregationResult, VersionMap
from allchanges.changes.naming import (
    aggregate_filename,
    copy_filename,
    extract_aggregate_end_version,
    extract_version,
    is_aggregate_filename,
    is_individual_filename,
)
from allchanges.changes.versions import coerce_version, filter_versions, sort_versions
from allchanges.config.models import AggregatorConfig
from allchanges.system.file_manager import FileManager
from allchanges.system.structlog_configurator import get_logger

logger = get_logger(__name__)


class ChangesAggregator:
    """Builds aggregate changelog files from individual version files."""

    def __init__(self, file_manager: FileManager):
        """Initialize ChangesAggregator.

        Args:
            file_manager: FileManager scoped to the changes directory
        """
        self.file_manager = file_manager

    def find_latest_aggregate(self) -> str | None:
        """Find the aggregate file with the highest end version.

        When two aggregates end on the same coerced version, the one whose raw
        end version is shorter wins ("2.0.0" over "2.0.0-rc.1").

        Returns:
            File name of the latest aggregate, or None if there is none
        """
        try:
            names = self.file_manager.list_directory_contents()
        except FileNotFoundError:
            logger.info(
                "Directory not found while searching for base aggregated file",
                path=str(self.file_manager.base_path),
            )
            return None
        except OSError as e:
            logger.error(
                "Failed to read directory while searching for base aggregated file",
                path=str(self.file_manager.base_path),
                error=str(e),
            )
            return None

        latest_name = None
        latest_end = ""
        latest_version = None
        for name in names:
            if not is_aggregate_filename(name):
                continue
            end_version = extract_aggregate_end_version(name)
            if end_version is None:
                continue
            coerced = coerce_version(end_version)
            if coerced is None:
                logger.warning(
                    "Could not coerce end version from potential aggregated file", file=name
                )
                continue
            if (
                latest_version is None
                or coerced > latest_version
                or (coerced == latest_version and len(end_version) < len(latest_end))
            ):
                latest_name, latest_end, latest_version = name, end_version, coerced

        return latest_name

    def load_aggregate(self, name: str) -> VersionMap:
        """Read and parse an aggregate file.

        Returns:
            The parsed version map, empty if the file is missing or unreadable
        """
        try:
            content = self.file_manager.read_file(name)
        except FileNotFoundError:
            logger.info("Base aggregated file not found, starting fresh", file=name)
            return {}
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read base aggregated file", file=name, error=str(e))
            return {}
        return parse_aggregate(content)

    def find_individual_files(self) -> list[str]:
        """List individual ``CHANGES-<version>.md`` files, sorted by name."""
        try:
            names = self.file_manager.list_directory_contents()
        except FileNotFoundError:
            logger.error("Source directory not found", path=str(self.file_manager.base_path))
            return []
        except OSError as e:
            logger.error(
                "Failed to read source directory",
                path=str(self.file_manager.base_path),
                error=str(e),
            )
            return []
        return [name for name in names if is_individual_filename(name)]

    def merge_individual_files(self, version_map: VersionMap, names: list[str]) -> int:
        """Add or overwrite map entries with the content of individual files.

        Args:
            version_map: Map updated in place
            names: Individual file names

        Returns:
            Number of files applied to the map
        """
        read_count = 0
        for name in names:
            version = extract_version(name)
            if not version:
                logger.warning("Could not extract version from file name", file=name)
                continue
            try:
                content = self.file_manager.read_file(name)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Failed to read individual file", file=name, error=str(e))
                continue
            version_map[version] = content.strip()
            read_count += 1
        return read_count

    def resolve_output_name(
        self, min_version: str, max_version: str, build_from_files: bool
    ) -> str:
        """Pick the output file name for a version span.

        Merge mode always reuses the exact name. Build-from-files mode appends
        ``-copy-N`` until the name is unused.
        """
        base_name = aggregate_filename(min_version, max_version)
        if not build_from_files:
            return base_name

        target_name = base_name
        counter = 1
        try:
            while self.file_manager.file_exists(target_name):
                target_name = copy_filename(base_name, counter)
                counter += 1
        except OSError as e:
            logger.error(
                "Could not check existence of output file", file=target_name, error=str(e)
            )
            return base_name
        return target_name

    def aggregate(self, config: AggregatorConfig) -> AggregationResult:
        """Run the full aggregation pipeline.

        Args:
            config: Options of this run

        Returns:
            AggregationResult describing what was (or would be) written

        Raises:
            OSError: If the target directory cannot be created or the output
                file cannot be written
        """
        version_range = config.version_range
        result = AggregationResult(
            target_dir=self.file_manager.base_path,
            build_from_files=config.build_from_files,
            dry_run=config.dry_run,
            version_range=version_range,
        )

        self.file_manager.ensure_directory()

        version_map: VersionMap = {}
        if config.build_from_files:
            logger.info("Build-from-files mode: ignoring existing aggregated files")
        else:
            base_name = self.find_latest_aggregate()
            if base_name:
                result.base_file = self.file_manager.path_for(base_name)
                logger.info("Using base aggregated file", file=str(result.base_file))
                version_map = self.load_aggregate(base_name)
                result.base_entries = len(version_map)
                logger.info("Parsed entries from base file", count=result.base_entries)
            else:
                logger.info("No existing aggregated file found in target directory")

        individual_files = self.find_individual_files()
        result.individual_files_found = len(individual_files)
        if not individual_files and not version_map:
            logger.info(
                "No individual files found and no base map loaded. Nothing to do.",
                path=str(self.file_manager.base_path),
            )
            return result
        logger.info("Found individual files", count=len(individual_files))

        result.individual_files_read = self.merge_individual_files(version_map, individual_files)
        result.total_entries = len(version_map)
        logger.info(
            "Read and updated/added entries from individual files",
            count=result.individual_files_read,
        )
        logger.info("Total entries in map before filtering", count=result.total_entries)

        filtered_map = version_map
        if not version_range.is_empty:
            logger.info("Filtering versions by range", range=version_range.describe())
            filtered_map = filter_versions(version_map, version_range)
            logger.info("Entries remaining after filtering", count=len(filtered_map))

        if not filtered_map:
            logger.info("No versions remaining after filtering. No output file will be generated.")
            return result

        result.versions = sort_versions(filtered_map)
        result.content = render_aggregate(result.versions, filtered_map)
        output_name = self.resolve_output_name(
            result.min_version, result.max_version, config.build_from_files
        )
        result.output_path = self.file_manager.path_for(output_name)

        if config.dry_run:
            return result

        # Directory may have been removed since the run started
        self.file_manager.ensure_directory()
        try:
            self.file_manager.write_file(output_name, result.content)
        except OSError as e:
            logger.error(
                "Failed to write output file", file=str(result.output_path), error=str(e)
            )
            raise
        result.written = True
        logger.info("Wrote aggregated changes", file=str(result.output_path))
        return result
