# Copyright contributors to the resource-conditions project. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_serializer

from resource_conditions.app.utils import to_rfc3339, to_utc

READY = "Ready"

# dropped from the serialized form when empty
OMIT_EMPTY = ("reason", "message", "lastTransitionTime")


class ConditionStatus(str, Enum):
    True_ = "True"
    False_ = "False"
    Unknown = "Unknown"


class Condition(BaseModel):
    type: str = Field(..., min_length=1, description="The type of condition (e.g., 'Ready', 'Database', 'API'). Unique within a set.")
    status: ConditionStatus = Field(..., description='The status of the condition: "True", "False", or "Unknown".')
    reason: str = Field(default="", description="A brief machine-readable explanation for the condition's status.")
    message: str = Field(default="", description="A human-readable message indicating details about the condition.")
    lastTransitionTime: Optional[datetime] = Field(
        default=None, description="The last time the condition transitioned from one status to another (UTC)."
    )

    @field_validator("lastTransitionTime")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return to_utc(value)

    @field_serializer("lastTransitionTime", when_used="json")
    def _rfc3339(self, value: Optional[datetime]) -> Optional[str]:
        return to_rfc3339(value)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        data = handler(self)
        for key in OMIT_EMPTY:
            if key in data and not data[key]:
                del data[key]
        return data


class ConditionedStatus(BaseModel):
    """Status section carrying a condition set.

    Implements the accessor contract, so a resource can embed it as its
    ``status`` and hand it straight to the helpers in
    :mod:`resource_conditions.conditions`.
    """

    conditions: List[Condition] = Field(default_factory=list, description="List of conditions for the resource.")

    def get_conditions(self) -> List[Condition]:
        return self.conditions

    def set_conditions(self, conditions: List[Condition]) -> None:
        self.conditions = conditions
