#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys

from decouple import config


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

    from django.core.management import execute_from_command_line
    from django.core.management.commands.runserver import Command as RunServer

    RunServer.default_port = config("PORT", default="4000")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
