"""Run configuration and policy resolution."""

from dataclasses import dataclass

from stream_splitter.errors import CannotDetermineSizeError, ConflictingOptionsError
from stream_splitter.naming import DEFAULT_PREFIX
from stream_splitter.policy import SplitKind, SplitPolicy

STDIN_SOURCE = "-"

DEFAULT_LINES_PER_CHUNK = 1000
DEFAULT_POLICY = SplitPolicy.by_lines(DEFAULT_LINES_PER_CHUNK)


@dataclass(frozen=True)
class SplitConfig:
    """
    Options for one split run.

    A count of zero means the option is unset. At most one of the three counts
    may be set; with none set the run uses DEFAULT_POLICY.
    """

    bytes_per_chunk: int = 0
    lines_per_chunk: int = 0
    number_of_files: int = 0
    input_source: str = STDIN_SOURCE
    output_prefix: str = DEFAULT_PREFIX

    @property
    def reads_stdin(self) -> bool:
        return self.input_source in ("", STDIN_SOURCE)

    @property
    def prefix(self) -> str:
        return self.output_prefix or DEFAULT_PREFIX

    def resolve_policy(self) -> SplitPolicy:
        """
        Pick the splitting policy from the configured counts.

        Raises:
            ConflictingOptionsError: if more than one count is set.
            ValueError: if a count is negative.
        """
        selected = [
            (kind, count)
            for kind, count in (
                (SplitKind.BYTES, self.bytes_per_chunk),
                (SplitKind.LINES, self.lines_per_chunk),
                (SplitKind.FILES, self.number_of_files),
            )
            if count != 0
        ]

        if len(selected) > 1:
            names = ", ".join(kind.value for kind, _ in selected)
            raise ConflictingOptionsError(f"Only one splitting option may be given, got: {names}")
        if not selected:
            return DEFAULT_POLICY

        kind, count = selected[0]
        return SplitPolicy(kind, count)

    def validate(self) -> SplitPolicy:
        """Resolve the policy and check it against the input source."""
        policy = self.resolve_policy()
        if policy.kind is SplitKind.FILES and self.reads_stdin:
            raise CannotDetermineSizeError(
                "Splitting by number of files requires an input file, not standard input"
            )
        return policy
