import uuid

from recipes.models import Ingredient, Instruction, Recipe, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")

    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )

    password = kwargs.pop("password", "Password123")

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )
    return user


def make_recipe(
    *,
    owner=None,
    title="Tomato soup",
    is_public=True,
    ingredients=(),
    instructions=(),
    **extra,
):
    """
    creates and returns a recipe. `ingredients` are (name, quantity, unit)
    tuples stored in the given order.
    """
    if owner is None:
        owner = make_user(username=f"owner{uuid.uuid4().hex[:6]}")

    recipe = Recipe.objects.create(
        owner=owner,
        title=title,
        is_public=is_public,
        **extra,
    )
    for position, (name, quantity, unit) in enumerate(ingredients):
        Ingredient.objects.create(recipe=recipe, name=name, quantity=quantity, unit=unit, position=position)
    for step_number, description in enumerate(instructions, start=1):
        Instruction.objects.create(recipe=recipe, step_number=step_number, description=description)
    return recipe
