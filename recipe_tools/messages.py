# SPDX-FileCopyrightText: 2024-2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0


from recipe_tools import HINT_LEVEL, get_logger


def debug(message: str, *args, **kwargs) -> None:
    """Log in level 10 (DEBUG)"""
    get_logger().debug(message, *args, **kwargs)


def hint(message: str, *args, **kwargs) -> None:
    """Log in level 15, hidden by RECIPE_MANAGER_NO_HINTS"""
    get_logger().log(HINT_LEVEL, message, *args, **kwargs)


def notice(message: str, *args, **kwargs) -> None:
    """Log in level 20 (INFO)"""
    get_logger().info(message, *args, **kwargs)
