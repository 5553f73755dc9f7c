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

from typing import List, Protocol, runtime_checkable

from resource_conditions.models.condition import Condition


@runtime_checkable
class ConditionsAccessor(Protocol):
    """Read/replace access to a resource's condition set.

    The helpers never keep the list they get back: every call re-reads it and
    hands a fresh list to ``set_conditions``. Typical implementation::

        class MyStatus(BaseModel):
            conditions: List[Condition] = []

            def get_conditions(self) -> List[Condition]:
                return self.conditions

            def set_conditions(self, conditions: List[Condition]) -> None:
                self.conditions = conditions
    """

    def get_conditions(self) -> List[Condition]: ...

    def set_conditions(self, conditions: List[Condition]) -> None: ...
