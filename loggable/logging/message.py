"""
Message text construction.

A log line's text is ``"<application><subject> : <message>"``. The message is
the template with printf-style (``%``) substitution of the extra arguments.
When the arguments don't fit the template the template and arguments are
rendered side by side instead, so building the text never raises.
"""

from collections.abc import Mapping
from typing import Any, Optional, Sequence

from loggable.errors.exceptions import FormatSubstitutionError

APPLICATION_SEPARATOR = " -- "
SUBJECT_SEPARATOR = " - "


def interpolate(template: Any, args: Sequence[Any] = ()) -> str:
    """
    Substitute arguments into a %-style template.

    A single mapping argument is used for named substitution, as
    ``logging.LogRecord.getMessage`` does.

    Raises:
        FormatSubstitutionError: If the arguments don't match the template
    """
    text = str(template)
    if not args:
        return text

    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    else:
        values = tuple(args)

    try:
        return text % values
    except (TypeError, ValueError, KeyError, OverflowError) as exc:
        raise FormatSubstitutionError(
            message=f"Cannot substitute arguments into {text!r}: {exc}",
            template=text,
            args=tuple(args),
        ) from exc


def _resolve_application(
    application: Optional[str], config: Any, owner: Any
) -> Optional[str]:
    if application is not None:
        return application
    default = getattr(config, "DEFAULT_APPLICATION", None)
    if default is not None:
        return default
    if owner is None:
        return None
    owner_type = owner if isinstance(owner, type) else type(owner)
    return owner_type.__name__


def format_message(
    template: Any,
    args: Sequence[Any] = (),
    application: Optional[str] = None,
    subject: Optional[str] = None,
    config: Any = None,
    owner: Any = None,
) -> str:
    """
    Build the text of a log line.

    Args:
        template: Message, or format specification when args are given
        args: Values substituted into the template
        application: Application name, defaults to the configured one, then
            to the owner's class name
        subject: Subject name, defaults to the configured one
        config: Settings providing DEFAULT_APPLICATION and DEFAULT_SUBJECT
        owner: Object (or class) on whose behalf the message is logged

    Returns:
        The rendered text. Unmatched arguments are appended as
        ``"<template> - [<args>]"``.
    """
    application = _resolve_application(application, config, owner)
    if subject is None:
        subject = getattr(config, "DEFAULT_SUBJECT", None)

    try:
        body = interpolate(template, args)
    except FormatSubstitutionError:
        body = f"{template} - {list(args)}"

    prefix = ""
    if application:
        prefix += f"{APPLICATION_SEPARATOR}{application}"
    if subject:
        prefix += f"{SUBJECT_SEPARATOR}{subject}"

    return f"{prefix} : {body}"
