"""HTTP layer: application dependencies and resource routes."""
