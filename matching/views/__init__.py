from .like_views import *
from .match_views import *
from .dashboard_views import *
