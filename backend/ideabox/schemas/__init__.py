from ideabox.schemas.auth import RegisterRequest, AdminRegisterRequest, LoginRequest, TokenResponse, MeOut
from ideabox.schemas.user import UserOut
from ideabox.schemas.coffee_shop import CoffeeShopOut
from ideabox.schemas.worker_coffee_shop import AddWorkerRequest, WorkerCoffeeShopOut
from ideabox.schemas.category import CategoryIn, CategoryOut, CategoryCreated, CategoryPage
from ideabox.schemas.reward_type import RewardTypeCreate, RewardTypeUpdate, RewardTypeOut
from ideabox.schemas.idea import IdeaCreate, IdeaOut
from ideabox.schemas.comment import CommentCreate, CommentOut
from ideabox.schemas.like import HasLikedOut
