# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

import sys

from query_range.cli import main


if __name__ == "__main__":
    sys.exit(main())
