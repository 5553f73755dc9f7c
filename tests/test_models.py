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

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from resource_conditions.models.condition import Condition, ConditionedStatus, ConditionStatus
from tests.condition_sets import BASETIME


def test_serialize_omits_empty_fields():
    condition = Condition(type="Ready", status=ConditionStatus.True_)
    assert condition.model_dump(mode="json") == {"type": "Ready", "status": "True"}


def test_serialize_full_condition():
    condition = Condition(
        type="Database",
        status="False",
        reason="DBDown",
        message="database unreachable",
        lastTransitionTime=datetime(2024, 10, 1, 0, 0, 0, 123456, tzinfo=timezone.utc),
    )
    assert condition.model_dump(mode="json") == {
        "type": "Database",
        "status": "False",
        "reason": "DBDown",
        "message": "database unreachable",
        "lastTransitionTime": "2024-10-01T00:00:00Z",
    }


def test_serialize_status_section():
    status = ConditionedStatus(conditions=[Condition(type="Ready", status="True"), Condition(type="API", status="Unknown", reason="Probing")])
    assert json.loads(status.model_dump_json()) == {
        "conditions": [
            {"type": "Ready", "status": "True"},
            {"type": "API", "status": "Unknown", "reason": "Probing"},
        ]
    }


def test_parse_kubernetes_condition():
    data = {"type": "Database", "status": "True", "lastTransitionTime": "2024-10-01T09:00:00+09:00"}
    condition = Condition.model_validate(data)
    assert condition.status == ConditionStatus.True_
    assert condition.reason == ""
    assert condition.message == ""
    assert condition.lastTransitionTime == BASETIME

    condition = Condition.model_validate_json('{"type": "Database", "status": "False", "lastTransitionTime": "2024-10-01T00:00:00Z"}')
    assert condition.lastTransitionTime == BASETIME


def test_naive_timestamp_is_utc():
    condition = Condition(type="Database", status="True", lastTransitionTime=datetime(2024, 10, 1))
    assert condition.lastTransitionTime.tzinfo == timezone.utc
    assert condition.lastTransitionTime == BASETIME


@pytest.mark.parametrize(
    "data",
    [
        {"type": "Database", "status": "Maybe"},
        {"type": "", "status": "True"},
        {"status": "True"},
        {"type": "Database"},
    ],
)
def test_invalid_condition(data):
    with pytest.raises(ValidationError):
        Condition.model_validate(data)
