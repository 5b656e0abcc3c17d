# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import sys
import typing as t

from pydantic import BaseModel as _BaseModel
from pydantic import ConfigDict, ValidationError, model_validator
from pydantic_core import ErrorDetails

from . import debug

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self  # noqa


class BaseModel(_BaseModel):
    """
    Some general notes about pydantic models

    - Optional[str] DOES NOT mean this field is not required. It means that the field can be None.
    - str = None means that this field is not required, but if it is present, it must be a string.
    - sequence matters,
        the order of fields in the model is the order in which they will be serialized.
    - all the recipe models are frozen, "modifying" methods return new instances.
    """

    model_config = ConfigDict(
        str_min_length=1,
        frozen=True,
    )

    @classmethod
    def fromdict(cls, d: t.Dict[str, t.Any]) -> Self:
        return cls.model_validate(dict_drop_none(d))

    def serialize(self) -> t.Dict[str, t.Any]:
        return self.model_dump()

    def model_dump(
        self,
        **kwargs,
    ) -> t.Dict[str, t.Any]:
        # default to True unless explicitly set
        exclude_none = kwargs.pop('exclude_none', True)
        by_alias = kwargs.pop('by_alias', True)

        return super().model_dump(
            exclude_none=exclude_none,
            by_alias=by_alias,
            **kwargs,
        )

    @model_validator(mode='before')
    @classmethod
    def drop_unknown_fields(cls, v):
        if not isinstance(v, dict):
            return v

        known_keys: t.Set[str] = set()
        for _k, _v in cls.model_fields.items():
            known_keys.add(_k)
            if _v.alias:
                known_keys.add(_v.alias)

        unknown_fields = sorted(set(v.keys()) - known_keys)
        if not unknown_fields:
            return v

        v = dict(v)
        for k in unknown_fields:
            debug(f'Dropping unknown key: {k}={v.pop(k)}')

        return v


def dict_drop_none(d: t.Dict[str, t.Any]) -> t.Dict[str, t.Any]:
    return {k: v for k, v in d.items() if v is not None}


def validation_error_to_str(error: ErrorDetails) -> str:
    """
    the original dict looks like
    - 'type': <correct type>
    - 'loc': (<field_name>, ... )
    - 'msg': <error message>
    - 'input': <input value>
    """
    msg = error['msg']

    # custom errors, remove the ValueError prefix
    eliminate_prefix = 'Value error, '
    if msg.startswith(eliminate_prefix):
        msg = msg[len(eliminate_prefix) :]

    fields = [str(_l) if isinstance(_l, str) else f'[{_l}]' for _l in error['loc']]
    if not fields:
        return msg

    return f'Invalid field "{":".join(fields)}": {msg}'


def polish_validation_error(err: ValidationError) -> str:
    error_msgs = []
    for e in err.errors(include_url=False):
        new_msg = validation_error_to_str(e)
        if new_msg not in error_msgs:
            error_msgs.append(new_msg)

    return '\n'.join(error_msgs)
