"""Configuration loader with bounded reads and a load state machine."""

import hashlib
import json
import os
import time
import uuid
from pathlib import Path

import structlog

from filefollow.config.constants import COMPONENT_CONFIG, MAX_CONFIG_SIZE
from filefollow.config.decoder import decode_config
from filefollow.config.effective import AgentConfig
from filefollow.config.errors import (
    ConfigError,
    ConfigTooLargeError,
    IncompleteReadError,
    MalformedConfigError,
)
from filefollow.config.state_machine import LoadState, LoadStateMachine
from filefollow.config.validator import validate_config
from filefollow.observability.logging import get_logger


logger = get_logger()


def read_config_bytes(path: Path, max_size: int = MAX_CONFIG_SIZE) -> bytes:
    """Read a config file in a single bounded read.

    Args:
        path: Path to the config file.
        max_size: Largest accepted file size in bytes.

    Returns:
        The full file content.

    Raises:
        OSError: If the file cannot be opened or stat'ed.
        ConfigTooLargeError: If the file is larger than ``max_size``.
        IncompleteReadError: If the read returned a different byte count
            than the file size reported by stat.
    """
    with path.open("rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        if size > max_size:
            raise ConfigTooLargeError(str(path), size, max_size)
        content = handle.read(size)

    if len(content) != size:
        raise IncompleteReadError(str(path), size, len(content))
    return content


class ConfigLoader:
    """Loads and validates the agent configuration file.

    Implements a state machine for a single load attempt:
    UNLOADED -> READING -> DECODED -> VALIDATED

    Any failure moves the loader to FAILED and re-raises the error.
    Nothing is retried; a new loader is needed for a fresh attempt.
    """

    def __init__(self, load_id: str, max_size: int = MAX_CONFIG_SIZE) -> None:
        """Initialize the loader.

        Args:
            load_id: Identifier bound to every log line of this load.
            max_size: Largest accepted config file size in bytes.
        """
        self._load_id = load_id
        self._max_size = max_size
        self._state_machine = LoadStateMachine()
        self._file_checksum = ""
        self._validation_errors: list[dict[str, str]] = []
        self._validation_duration_ms: float = 0

    @property
    def state(self) -> LoadState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def file_checksum(self) -> str:
        """Get the SHA-256 checksum of the file that was read."""
        return self._file_checksum

    @property
    def validation_errors(self) -> list[dict[str, str]]:
        """Get recorded errors if the load failed."""
        return self._validation_errors.copy()

    @property
    def validation_duration_ms(self) -> float:
        """Get load and validation duration in milliseconds."""
        return self._validation_duration_ms

    def load(self, path: Path | str) -> AgentConfig:
        """Load, decode and validate a config file.

        Args:
            path: Path to the config file.

        Returns:
            Validated, immutable agent configuration.

        Raises:
            OSError: If the file cannot be opened or stat'ed.
            ConfigError: If the file is too large, short-read, malformed
                or breaks a validation rule.
            LoadStateError: If this loader was already used.
        """
        path = Path(path)
        start_time = time.perf_counter()

        self._state_machine.transition(LoadState.READING)

        log = logger.bind(
            load_id=self._load_id,
            component=COMPONENT_CONFIG,
            phase="READING",
        )

        try:
            log.info("loading_config_file", file_path=str(path))
            content = read_config_bytes(path, self._max_size)
            self._file_checksum = hashlib.sha256(content).hexdigest()
            log.info(
                "config_file_read",
                file_path=str(path),
                file_size=len(content),
                file_sha256=self._file_checksum,
            )

            raw = decode_config(content)
            self._state_machine.transition(LoadState.DECODED)
            log.debug(
                "config_decoded",
                phase="DECODED",
                follower_count=len(raw.followers),
            )

            validated = validate_config(raw)
            effective = AgentConfig.from_validated(
                validated,
                source_path=str(path),
                file_checksum=self._file_checksum,
            )
            self._state_machine.transition(LoadState.VALIDATED)

            end_time = time.perf_counter()
            self._validation_duration_ms = (end_time - start_time) * 1000

            log.info(
                "config_validated",
                phase="VALIDATED",
                follower_count=len(effective.follower_sections),
                target_count=validated.global_section.target_count(),
                validation_error_count=0,
                config_validation_duration_ms=self._validation_duration_ms,
            )
            return effective

        except MalformedConfigError as e:
            self._handle_malformed_error(e, log)
            raise

        except ConfigError as e:
            self._handle_config_error(e, log)
            raise

        except OSError as e:
            self._handle_file_error(e, log)
            raise

    def _handle_malformed_error(
        self,
        error: MalformedConfigError,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        """Handle a structural decode error."""
        self._mark_failed()
        if error.errors:
            self._validation_errors.extend(error.errors)
        else:
            self._validation_errors.append(error.to_dict())
        log.error(
            "config_load_failed",
            phase="FAILED",
            error_type=error.error_type,
            validation_error_count=len(self._validation_errors),
            errors=self._validation_errors,
        )

    def _handle_config_error(
        self,
        error: ConfigError,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        """Handle a size, read or rule violation error."""
        self._mark_failed()
        self._validation_errors.append(error.to_dict())
        log.error(
            "config_load_failed",
            phase="FAILED",
            error_type=error.error_type,
            error=error.message,
            location=error.location,
        )

    def _handle_file_error(
        self,
        error: OSError,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        """Handle a file open or stat error."""
        self._mark_failed()
        error_type = (
            "file_not_found" if isinstance(error, FileNotFoundError) else "io_error"
        )
        self._validation_errors.append(
            {
                "loc": "file",
                "msg": str(error),
                "type": error_type,
            }
        )
        log.error(
            "config_load_failed",
            phase="FAILED",
            error_type=error_type,
            error=str(error),
        )

    def _mark_failed(self) -> None:
        if not self._state_machine.is_failed():
            self._state_machine.transition(LoadState.FAILED)

    def get_validation_summary(self) -> dict[str, object]:
        """Get a summary of the load attempt.

        Returns:
            Dictionary with validation summary.
        """
        return {
            "load_id": self._load_id,
            "state": self._state_machine.state.name,
            "validated": self._state_machine.is_validated(),
            "file_checksum": self._file_checksum,
            "validation_error_count": len(self._validation_errors),
            "validation_errors": self._validation_errors,
            "validation_duration_ms": self._validation_duration_ms,
        }

    def get_validation_summary_json(self) -> str:
        """Get validation summary as JSON string with stable ordering."""
        return json.dumps(self.get_validation_summary(), sort_keys=True, indent=2)


def load_config(path: Path | str, load_id: str | None = None) -> AgentConfig:
    """Load the agent configuration with a fresh loader.

    Args:
        path: Path to the config file.
        load_id: Optional identifier for log correlation.

    Returns:
        Validated, immutable agent configuration.
    """
    loader = ConfigLoader(load_id=load_id or str(uuid.uuid4()))
    return loader.load(path)
