#!/usr/bin/env python3

"""Infrastructure layer for technical concerns (configuration, logging)."""
