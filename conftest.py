# The MIT License (MIT)
# 
# Copyright (c) 2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import pytest

@pytest.fixture
def banks():
  return ["09:00-16:00 Royal Bank of Scotland",
          "11:00-17:00 Morgan Stanley",
          "14:00-20:00 JP Morgan",
          "02:00-07:00 National Australia Bank"]
