# SPDX-License-Identifier: MIT


class EntityType:
    PROJECT = "project"
    TASK = "task"
    EVENT = "event"
