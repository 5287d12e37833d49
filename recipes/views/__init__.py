from .api_views import *
from .collection_views import *
from .recipe_views import *
from .shopping_list_views import *
