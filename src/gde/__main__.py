'''
Author: leviathan 670916484@qq.com
Date: 2025-12-02 16:58:12
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-12-02 16:58:12
FilePath: /gde/src/gde/__main__.py
Description:

Copyright (c) 2025 by leviathan, All Rights Reserved.
'''
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
