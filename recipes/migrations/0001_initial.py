import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three alphanumericals", regex="^\\w{3,}$")])),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["username"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="", max_length=4000)),
                ("prep_time_minutes", models.PositiveIntegerField(default=0)),
                ("cook_time_minutes", models.PositiveIntegerField(default=0)),
                ("servings", models.PositiveIntegerField(default=1)),
                ("difficulty", models.CharField(choices=[("EASY", "Easy"), ("MEDIUM", "Medium"), ("HARD", "Hard")], default="EASY", max_length=10)),
                ("is_public", models.BooleanField(default=False)),
                ("image_urls", models.JSONField(blank=True, default=list)),
                ("categories", models.JSONField(blank=True, default=list)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("average_rating", models.FloatField(default=0.0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(db_column="owner_id", on_delete=django.db.models.deletion.CASCADE, related_name="recipes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe",
                "indexes": [models.Index(fields=["is_public", "-like_count"], name="recipe_public_likes_idx")],
                "constraints": [models.CheckConstraint(condition=models.Q(("average_rating__gte", 0), ("average_rating__lte", 5)), name="recipe_average_rating_range")],
            },
        ),
        migrations.CreateModel(
            name="Ingredient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("quantity", models.FloatField(default=0)),
                ("unit", models.CharField(blank=True, default="", max_length=50)),
                ("position", models.PositiveIntegerField(default=0)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ingredients", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_ingredient",
                "ordering": ["position", "id"],
                "constraints": [models.CheckConstraint(condition=models.Q(("quantity__gte", 0)), name="ingredient_quantity_gte_0")],
            },
        ),
        migrations.CreateModel(
            name="Instruction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("step_number", models.PositiveIntegerField()),
                ("description", models.TextField(max_length=1000)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="instructions", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_instruction",
                "ordering": ["step_number", "id"],
            },
        ),
        migrations.CreateModel(
            name="Rating",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150)),
                ("value", models.FloatField()),
                ("review", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to="recipes.recipe")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "rating",
                "constraints": [
                    models.UniqueConstraint(fields=("recipe", "user"), name="uniq_rating_recipe_user"),
                    models.CheckConstraint(condition=models.Q(("value__gte", 0), ("value__lte", 5)), name="rating_value_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("username", models.CharField(max_length=150)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="recipes.recipe")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "like",
                "constraints": [models.UniqueConstraint(fields=("user", "recipe"), name="uniq_like_user_recipe")],
            },
        ),
        migrations.CreateModel(
            name="RecipeCollection",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="collections", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe_collection",
            },
        ),
        migrations.CreateModel(
            name="CollectionItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("added_at", models.DateTimeField(auto_now_add=True)),
                ("collection", models.ForeignKey(db_column="collection_id", on_delete=django.db.models.deletion.CASCADE, related_name="items", to="recipes.recipecollection")),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="collection_items", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_collection_item",
                "constraints": [models.UniqueConstraint(fields=("collection", "recipe"), name="uniq_collection_item")],
            },
        ),
        migrations.CreateModel(
            name="ShoppingList",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="shopping_lists", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "shopping_list",
            },
        ),
        migrations.CreateModel(
            name="ShoppingItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                ("ingredient_name", models.CharField(max_length=255)),
                ("quantity", models.FloatField(default=0)),
                ("unit", models.CharField(blank=True, default="", max_length=50)),
                ("is_checked", models.BooleanField(default=False)),
                ("shopping_list", models.ForeignKey(db_column="shopping_list_id", on_delete=django.db.models.deletion.CASCADE, related_name="items", to="recipes.shoppinglist")),
            ],
            options={
                "db_table": "shopping_item",
                "ordering": ["position"],
                "constraints": [models.UniqueConstraint(fields=("shopping_list", "position"), name="uniq_shopping_item_position")],
            },
        ),
    ]
