from ideabox.models.base import Base
from ideabox.models.user import Role, User
from ideabox.models.coffee_shop import CoffeeShop
from ideabox.models.worker_coffee_shop import WorkerCoffeeShop
from ideabox.models.category import Category
from ideabox.models.reward_type import RewardType
from ideabox.models.idea import Idea
from ideabox.models.comment import IdeaComment
from ideabox.models.like import IdeaLike
