import re
from typing import Annotated

from pydantic import AfterValidator

# Python's JSON decoder keeps unpaired \uD800-\uDFFF escapes as lone surrogates,
# which can't be encoded to UTF-8 for the response or the database.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def replace_lone_surrogates(value: str) -> str:
    return _LONE_SURROGATE.sub("\ufffd", value)


DecodedStr = Annotated[str, AfterValidator(replace_lone_surrogates)]
