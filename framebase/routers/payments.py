"""
Payment methods router.

Public: the checkout page asks which methods to show for a locale.
"""

from typing import Optional

from fastapi import APIRouter, Query, Request

from common.utils import success_response

from framebase.payments import get_payment_methods_for_locale

router = APIRouter(prefix="/payments")

DEFAULT_LOCALE = "en-US"


def resolve_locale(locale: Optional[str], accept_language: Optional[str]) -> str:
    """
    Pick the locale: explicit query value, else the first Accept-Language
    tag, else en-US.
    """
    if locale and locale.strip():
        return locale.strip()
    if accept_language:
        first = accept_language.split(",")[0].split(";")[0].strip()
        if first and first != "*":
            return first
    return DEFAULT_LOCALE


@router.get("/methods")
async def payment_methods(request: Request, locale: Optional[str] = Query(None)):
    resolved = resolve_locale(locale, request.headers.get("Accept-Language"))
    methods = get_payment_methods_for_locale(resolved)
    return success_response({
        "locale": resolved,
        "methods": [method.to_dict() for method in methods],
    })
