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

"""Helpers for Kubernetes-style status conditions.

Condition sets are kept sorted at all times: ``Ready`` first, everything else
by ascending type. Resources plug in through :class:`ConditionsAccessor`; each
helper reads the current set, works on a copy and writes the copy back.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple, Union

from resource_conditions.accessor import ConditionsAccessor
from resource_conditions.app import utils
from resource_conditions.app.config import ConditionsConfig, TransitionTriggerEnum
from resource_conditions.models.condition import READY, Condition, ConditionStatus

logger = logging.getLogger(__name__)


def condition_sort_key(condition: Condition) -> Tuple[bool, str]:
    # code point order on str is the same as byte order on its UTF-8 encoding
    return (condition.type != READY, condition.type)


def sort_conditions(conditions: List[Condition]) -> None:
    conditions.sort(key=condition_sort_key)


def get_condition(conditions: Iterable[Condition], type: str) -> Optional[Condition]:
    for condition in conditions:
        if condition.type == type:
            return condition
    return None


def copy_conditions(conditions: Iterable[Condition]) -> List[Condition]:
    return [x.model_copy() for x in conditions]


def has_transitioned(current: Condition, status: ConditionStatus, reason: str, trigger: TransitionTriggerEnum) -> bool:
    if trigger == TransitionTriggerEnum.Status:
        return current.status != status
    if trigger == TransitionTriggerEnum.Any:
        return current.status != status or current.reason != reason
    return current.reason != reason


def set_condition(
    conditions: List[Condition],
    type: str,
    status: Union[ConditionStatus, str],
    reason: str = "",
    message: str = "",
    now: Optional[datetime] = None,
    config: Optional[ConditionsConfig] = None,
) -> None:
    """Create or update the condition of the given type, then re-sort.

    ``conditions`` is modified in place; callers holding a list that came from
    an accessor must pass a copy (see :func:`copy_conditions`).
    """
    status = ConditionStatus(status)
    now = now if now else utils.get_timestamp()
    config = config if config else ConditionsConfig()

    current = get_condition(conditions, type)
    if current:
        if has_transitioned(current, status, reason, config.transition_trigger):
            logger.debug(f"Condition '{type}' transitioned: {current.status.value}/{current.reason!r} -> {status.value}/{reason!r}")
            current.lastTransitionTime = utils.to_utc(now)
        current.status = status
        current.reason = reason
        current.message = message
    else:
        logger.debug(f"Condition '{type}' created with status {status.value}")
        conditions.append(Condition(type=type, status=status, reason=reason, message=message, lastTransitionTime=now))

    sort_conditions(conditions)


def _mark(obj: ConditionsAccessor, type: str, status: ConditionStatus, reason: str, message: str, config: Optional[ConditionsConfig]) -> None:
    conditions = copy_conditions(obj.get_conditions())
    set_condition(conditions, type, status, reason, message, config=config)
    obj.set_conditions(conditions)


def mark_true(obj: ConditionsAccessor, type: str, config: Optional[ConditionsConfig] = None) -> None:
    _mark(obj, type, ConditionStatus.True_, "", "", config)


def mark_false(obj: ConditionsAccessor, type: str, reason: str = "", message: str = "", config: Optional[ConditionsConfig] = None) -> None:
    _mark(obj, type, ConditionStatus.False_, reason, message, config)


def mark_unknown(obj: ConditionsAccessor, type: str, reason: str = "", message: str = "", config: Optional[ConditionsConfig] = None) -> None:
    _mark(obj, type, ConditionStatus.Unknown, reason, message, config)


def get(obj: ConditionsAccessor, type: str) -> Optional[Condition]:
    condition = get_condition(obj.get_conditions(), type)
    return condition.model_copy() if condition else None


def _has_status(obj: ConditionsAccessor, type: str, status: ConditionStatus) -> bool:
    condition = get_condition(obj.get_conditions(), type)
    return condition is not None and condition.status == status


def is_true(obj: ConditionsAccessor, type: str) -> bool:
    return _has_status(obj, type, ConditionStatus.True_)


def is_false(obj: ConditionsAccessor, type: str) -> bool:
    return _has_status(obj, type, ConditionStatus.False_)


def is_unknown(obj: ConditionsAccessor, type: str) -> bool:
    return _has_status(obj, type, ConditionStatus.Unknown)


def sync_ready(obj: ConditionsAccessor, config: Optional[ConditionsConfig] = None) -> None:
    """Recompute the ``Ready`` condition from every other condition.

    Ready is False when any other condition is False, taking reason and
    message from the first False one in sorted type order. Otherwise Ready is
    True with an empty reason and message. Unknown conditions count for
    neither.
    """
    conditions = copy_conditions(obj.get_conditions())

    candidates = sorted((x for x in conditions if x.type != READY), key=condition_sort_key)
    blocking = next((x for x in candidates if x.status == ConditionStatus.False_), None)

    if blocking:
        logger.debug(f"Resource not ready: condition '{blocking.type}' is False ({blocking.reason})")
        set_condition(conditions, READY, ConditionStatus.False_, blocking.reason, blocking.message, config=config)
    else:
        set_condition(conditions, READY, ConditionStatus.True_, "", "", config=config)

    obj.set_conditions(conditions)
