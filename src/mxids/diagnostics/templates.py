"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Longest input echoed back in a diagnostic. Oversized identifiers are
# exactly the inputs we refuse, so they are never repeated in full.
_MAX_ECHO_LENGTH = 64


def _clip(value: str) -> str:
    if len(value) > _MAX_ECHO_LENGTH:
        return value[:_MAX_ECHO_LENGTH] + "..."
    return value


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://spec.matrix.org/latest/appendices"

    @staticmethod
    def maximum_length_exceeded(value: str, length: int, limit: int, unit: str) -> Diagnostic:
        """Identifier longer than its upper bound.

        Args:
            value: The rejected identifier text
            length: Measured length of the text
            limit: Maximum permitted length
            unit: Unit of length and limit ("bytes" or "characters")

        Returns:
            Diagnostic for MAXIMUM_LENGTH_EXCEEDED
        """
        msg = f"Identifier is {length} {unit} long, maximum is {limit} {unit}"
        return Diagnostic(
            code=DiagnosticCode.MAXIMUM_LENGTH_EXCEEDED,
            message=msg,
            input_value=_clip(value),
            hint="Identifiers are bounded in length; check for concatenated or corrupted input",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#common-identifier-format",
        )

    @staticmethod
    def minimum_length_not_satisfied(value: str, length: int, limit: int) -> Diagnostic:
        """Identifier shorter than the smallest well-formed identifier.

        Args:
            value: The rejected identifier text
            length: Byte length of the text
            limit: Minimum permitted byte length

        Returns:
            Diagnostic for MINIMUM_LENGTH_NOT_SATISFIED
        """
        msg = f"Identifier is {length} bytes long, minimum is {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.MINIMUM_LENGTH_NOT_SATISFIED,
            message=msg,
            input_value=_clip(value),
            hint="The shortest identifier is a sigil, one localpart character, ':' and a host",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#common-identifier-format",
        )

    @staticmethod
    def empty_segment(value: str, segment: str) -> Diagnostic:
        """A required segment (localpart, key version, room version) is empty.

        Args:
            value: The rejected identifier text
            segment: Name of the empty segment

        Returns:
            Diagnostic for MINIMUM_LENGTH_NOT_SATISFIED
        """
        msg = f"Identifier has an empty {segment}"
        return Diagnostic(
            code=DiagnosticCode.MINIMUM_LENGTH_NOT_SATISFIED,
            message=msg,
            input_value=_clip(value),
            hint=f"The {segment} must contain at least one character",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#common-identifier-format",
        )

    @staticmethod
    def missing_sigil(value: str, expected: tuple[str, ...]) -> Diagnostic:
        """Identifier does not begin with the sigil of its kind.

        Args:
            value: The rejected identifier text
            expected: Sigils accepted at position 0

        Returns:
            Diagnostic for MISSING_SIGIL
        """
        choices = " or ".join(f"'{sigil}'" for sigil in expected)
        msg = f"Identifier must start with {choices}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_SIGIL,
            message=msg,
            input_value=_clip(value),
            hint="Prefix the identifier with its sigil",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#common-identifier-format",
        )

    @staticmethod
    def missing_delimiter(value: str) -> Diagnostic:
        """Authority-bearing identifier without ':'.

        Args:
            value: The rejected identifier text

        Returns:
            Diagnostic for MISSING_DELIMITER
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_DELIMITER,
            message="Identifier has no ':' separating localpart and server name",
            input_value=_clip(value),
            hint="Use the form <sigil><localpart>:<server name>",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#common-identifier-format",
        )

    @staticmethod
    def invalid_host(value: str) -> Diagnostic:
        """Authority without a host.

        Args:
            value: The rejected authority text

        Returns:
            Diagnostic for INVALID_HOST
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_HOST,
            message="Server name has no host",
            input_value=_clip(value),
            hint="A server name is a DNS name, IPv4 address or [IPv6] literal",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#server-name",
        )

    @staticmethod
    def invalid_server_name(value: str, reason: str) -> Diagnostic:
        """Authority present but malformed.

        Args:
            value: The rejected authority text
            reason: What is wrong with it

        Returns:
            Diagnostic for INVALID_SERVER_NAME
        """
        msg = f"Invalid server name: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SERVER_NAME,
            message=msg,
            input_value=_clip(value),
            hint="Use host or host:port, where port is a number from 0 to 65535",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#server-name",
        )

    @staticmethod
    def missing_server_key_delimiter(value: str) -> Diagnostic:
        """Server key identifier without ':'.

        Args:
            value: The rejected key identifier text

        Returns:
            Diagnostic for MISSING_SERVER_KEY_DELIMITER
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_SERVER_KEY_DELIMITER,
            message="Server key identifier has no ':' separating algorithm and version",
            input_value=_clip(value),
            hint="Use the form <algorithm>:<version>, e.g. ed25519:abc",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#signing-details",
        )

    @staticmethod
    def unknown_key_algorithm(value: str, algorithm: str, known: tuple[str, ...]) -> Diagnostic:
        """Server key algorithm outside the known set.

        Args:
            value: The rejected key identifier text
            algorithm: The algorithm segment
            known: Known algorithm names

        Returns:
            Diagnostic for UNKNOWN_KEY_ALGORITHM
        """
        msg = f"Unknown key algorithm '{_clip(algorithm)}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY_ALGORITHM,
            message=msg,
            input_value=_clip(value),
            hint=f"Known algorithms: {', '.join(known)}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#signing-details",
        )

    @staticmethod
    def invalid_characters(value: str, segment: str) -> Diagnostic:
        """Segment contains characters outside its permitted class.

        Args:
            value: The rejected identifier text
            segment: Name of the offending segment

        Returns:
            Diagnostic for INVALID_CHARACTERS
        """
        msg = f"Identifier {segment} contains invalid characters"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTERS,
            message=msg,
            input_value=_clip(value),
            hint=f"The {segment} may only contain alphanumeric characters and '_'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#signing-details",
        )
