"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Source texts are truncated in messages; catalogs hold multi-paragraph strings.
_SOURCE_PREVIEW_LENGTH: int = 60


def _preview(source: str) -> str:
    """Shorten and single-line a source text for display."""
    flat = " ".join(source.split())
    if len(flat) > _SOURCE_PREVIEW_LENGTH:
        return flat[:_SOURCE_PREVIEW_LENGTH] + "..."
    return flat


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Lookup conditions
    # ------------------------------------------------------------------

    @staticmethod
    def message_not_found(context: str, source: str) -> Diagnostic:
        """No message for the (context, source) pair.

        Args:
            context: Context name queried
            source: Source text queried

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{_preview(source)}' not found in context '{context}'"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Regenerate the catalog from current sources",
            context=context,
            source=source,
        )

    @staticmethod
    def unfinished_translation(context: str, source: str, index: int) -> Diagnostic:
        """Selected variant is unfinished or empty.

        Args:
            context: Context name
            source: Source text
            index: Plural form index that was selected

        Returns:
            Diagnostic for UNFINISHED_TRANSLATION
        """
        msg = (
            f"Translation of '{_preview(source)}' in context '{context}' "
            f"is unfinished (form {index})"
        )
        return Diagnostic(
            code=DiagnosticCode.UNFINISHED_TRANSLATION,
            message=msg,
            hint="Complete the translation and mark it finished",
            context=context,
            source=source,
        )

    @staticmethod
    def missing_cardinality(context: str, source: str) -> Diagnostic:
        """Plural-sensitive message resolved without a count.

        Args:
            context: Context name
            source: Source text

        Returns:
            Diagnostic for MISSING_CARDINALITY
        """
        msg = (
            f"Message '{_preview(source)}' in context '{context}' is plural-sensitive "
            "but no count was supplied"
        )
        return Diagnostic(
            code=DiagnosticCode.MISSING_CARDINALITY,
            message=msg,
            hint="Pass count= when resolving numerus messages",
            context=context,
            source=source,
        )

    @staticmethod
    def unknown_locale(locale: str) -> Diagnostic:
        """Catalog locale has no plural rule.

        Args:
            locale: Locale code of the catalog

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"No plural rule for locale '{locale}'; using the two-form fallback rule"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Register a rule with register_plural_rule()",
        )

    # ------------------------------------------------------------------
    # Rendering conditions
    # ------------------------------------------------------------------

    @staticmethod
    def argument_count_mismatch(marker: str, supplied: int) -> Diagnostic:
        """Template references an argument that was not supplied.

        Args:
            marker: Marker left in the output (e.g. "%3", "%n")
            supplied: Number of positional arguments supplied

        Returns:
            Diagnostic for ARGUMENT_COUNT_MISMATCH
        """
        if marker.endswith("n"):
            msg = f"Template references {marker} but no count was supplied"
        else:
            msg = f"Template references {marker} but only {supplied} argument(s) were supplied"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_COUNT_MISMATCH,
            message=msg,
            hint="Check the argument list passed to resolve()",
        )

    # ------------------------------------------------------------------
    # Load errors
    # ------------------------------------------------------------------

    @staticmethod
    def truncated_document(detail: str, line: int | None = None, column: int | None = None) -> Diagnostic:
        """Input ended mid-record.

        Args:
            detail: Parser or reader detail
            line: Line where input ended (if known)
            column: Column where input ended (if known)

        Returns:
            Diagnostic for TRUNCATED_DOCUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_DOCUMENT,
            message=f"Catalog document is truncated: {detail}",
            hint="The file was probably cut short while being written or copied",
            line=line,
            column=column,
        )

    @staticmethod
    def invalid_xml(detail: str, line: int | None = None, column: int | None = None) -> Diagnostic:
        """Document is not well-formed XML.

        Args:
            detail: Parser detail
            line: Line of the error
            column: Column of the error

        Returns:
            Diagnostic for INVALID_XML
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_XML,
            message=f"Catalog document is not well-formed XML: {detail}",
            line=line,
            column=column,
        )

    @staticmethod
    def unexpected_element(tag: str, parent: str | None, line: int | None = None) -> Diagnostic:
        """Element appears where the catalog format does not allow it.

        Args:
            tag: Offending element name
            parent: Enclosing element name (None at document root)
            line: Line of the element

        Returns:
            Diagnostic for UNEXPECTED_ELEMENT
        """
        where = f"inside <{parent}>" if parent else "at document root"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_ELEMENT,
            message=f"Unexpected element <{tag}> {where}",
            hint="Expected a Qt Linguist <TS> document",
            line=line,
        )

    @staticmethod
    def empty_context_name(line: int | None = None) -> Diagnostic:
        """Context declared without a name.

        Args:
            line: Line of the context

        Returns:
            Diagnostic for EMPTY_CONTEXT_NAME
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CONTEXT_NAME,
            message="Context name must not be empty",
            hint="Every <context> needs a <name> before its messages",
            line=line,
        )

    @staticmethod
    def duplicate_message(context: str, source: str, index: int) -> Diagnostic:
        """Same (context, source) declared twice for the same form.

        Args:
            context: Context name
            source: Source text
            index: Plural form index that collided

        Returns:
            Diagnostic for DUPLICATE_MESSAGE
        """
        msg = (
            f"Duplicate message '{_preview(source)}' in context '{context}' "
            f"(form {index} declared twice)"
        )
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE,
            message=msg,
            hint="Merge the entries or remove one of them",
            context=context,
            source=source,
        )

    @staticmethod
    def non_contiguous_forms(context: str, source: str, indices: tuple[int, ...]) -> Diagnostic:
        """Plural form indices have gaps or do not start at 0.

        Args:
            context: Context name
            source: Source text
            indices: Sorted indices that were declared

        Returns:
            Diagnostic for NON_CONTIGUOUS_FORMS
        """
        listed = ", ".join(str(i) for i in indices)
        msg = (
            f"Plural forms of '{_preview(source)}' in context '{context}' are not "
            f"contiguous from 0 (got {listed})"
        )
        return Diagnostic(
            code=DiagnosticCode.NON_CONTIGUOUS_FORMS,
            message=msg,
            context=context,
            source=source,
        )

    @staticmethod
    def plural_form_count_mismatch(
        context: str, source: str, found: int, expected: int, locale: str
    ) -> Diagnostic:
        """Plural message form count disagrees with locale cardinality.

        Args:
            context: Context name
            source: Source text
            found: Number of forms declared
            expected: Locale cardinality
            locale: Catalog locale

        Returns:
            Diagnostic for PLURAL_FORM_COUNT_MISMATCH
        """
        msg = (
            f"Plural message '{_preview(source)}' in context '{context}' has {found} "
            f"form(s) but locale '{locale}' requires {expected}"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_COUNT_MISMATCH,
            message=msg,
            hint="Check the catalog language attribute or the numerusform entries",
            context=context,
            source=source,
        )

    @staticmethod
    def locale_not_declared() -> Diagnostic:
        """Neither the caller nor the document names a locale.

        Returns:
            Diagnostic for LOCALE_NOT_DECLARED
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_DECLARED,
            message="Catalog does not declare a target locale",
            hint="Add a language attribute to <TS> or pass locale= to load()",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Document exceeds the configured size limit.

        Args:
            size: Document size in bytes (or characters)
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=f"Catalog document size {size} exceeds limit {limit}",
            hint="Raise max_source_size if the catalog is trusted",
        )

    @staticmethod
    def invalid_record(detail: str, context: str | None = None) -> Diagnostic:
        """Mapping record has the wrong shape.

        Args:
            detail: What is wrong with the record
            context: Context being read, if known

        Returns:
            Diagnostic for INVALID_RECORD
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_RECORD,
            message=f"Invalid catalog record: {detail}",
            context=context,
        )

    @staticmethod
    def strict_validation_failed(count: int) -> Diagnostic:
        """Strict load rejected a catalog with data-quality warnings.

        Args:
            count: Number of warnings found

        Returns:
            Diagnostic for STRICT_VALIDATION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.STRICT_VALIDATION_FAILED,
            message=f"Strict load rejected catalog with {count} data-quality warning(s)",
            hint="Inspect validate_catalog() output or load with strict=False",
        )

    @staticmethod
    def invalid_byte_escape(value: str) -> Diagnostic:
        """<byte value="..."/> that does not name a character.

        Args:
            value: Raw value attribute

        Returns:
            Diagnostic for INVALID_BYTE_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_BYTE_ESCAPE,
            message=f"Invalid <byte> value {value!r}",
            hint='Use a decimal code point or a hex one such as value="x1b"',
        )

    @staticmethod
    def message_without_source(context: str | None) -> Diagnostic:
        """<message> element with no <source> child.

        Args:
            context: Context being read, if known

        Returns:
            Diagnostic for MESSAGE_WITHOUT_SOURCE
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_WITHOUT_SOURCE,
            message=f"<message> without <source> in context '{context or ''}'",
            hint="Every <message> needs the source text it translates",
            context=context,
        )
