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

import os
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings

PROJECT_LOG_LEVEL = os.getenv("PROJECT_LOG_LEVEL", "")
ROOT_LOG_LEVEL = os.getenv("ROOT_LOG_LEVEL", "")


class TransitionTriggerEnum(str, Enum):
    Reason = "reason"
    Status = "status"
    Any = "any"


class ConditionsConfig(BaseSettings):
    transition_trigger: TransitionTriggerEnum = Field(
        TransitionTriggerEnum.Reason,
        description=(
            "Which change refreshes lastTransitionTime of an existing condition. "
            "'reason' (default) refreshes only when the reason changes, 'status' only when the status changes, "
            "'any' when either changes."
        ),
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "RESOURCE_CONDITIONS_"
        extra = "ignore"
