from .Error import Error
from .Pagination import Paginated, Edge, PageInfo, Node
