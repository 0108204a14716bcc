"""Pre-built project templates for common app categories.

A project template contributes no files of its own.  Its bundle carries the
extra pub packages the category needs and the feature modules the generator
must scaffold on top of the base architecture.
"""

from __future__ import annotations

from flutter_blueprint.config import BlueprintConfig, ProjectTemplate

from .bundle import TemplateBundle


TEMPLATE_FEATURES: dict[ProjectTemplate, tuple[str, ...]] = {
    ProjectTemplate.BLANK: ("Home screen", "Basic navigation"),
    ProjectTemplate.ECOMMERCE: (
        "Product listing", "Product details", "Shopping cart", "Checkout flow",
        "Order history", "User authentication", "Payment integration (mock)",
        "Search and filters",
    ),
    ProjectTemplate.SOCIAL_MEDIA: (
        "User profiles", "Posts feed", "Create post", "Comments", "Likes system",
        "User authentication", "Image uploads", "Follow/Unfollow",
    ),
    ProjectTemplate.FITNESS_TRACKER: (
        "Workout logging", "Exercise library", "Progress charts", "Goal setting",
        "Statistics dashboard", "Calendar view", "Personal records",
        "Body measurements",
    ),
    ProjectTemplate.FINANCE_APP: (
        "Transaction list", "Add transaction", "Categories", "Budget management",
        "Spending analytics", "Monthly reports", "Recurring transactions",
        "Currency support",
    ),
    ProjectTemplate.FOOD_DELIVERY: (
        "Restaurant list", "Restaurant details", "Menu browsing", "Shopping cart",
        "Order placement", "Order tracking", "User authentication", "Favorites",
    ),
    ProjectTemplate.CHAT_APP: (
        "Chat list", "Chat room", "Send messages", "Media sharing",
        "User presence", "Push notifications", "User profiles", "Search contacts",
    ),
}


def get_template(template: ProjectTemplate, config: BlueprintConfig) -> TemplateBundle:
    """Return the bundle for *template*.

    The bundle includes the extra dependencies and required feature modules
    for the selected category.  *config* is accepted so categories can vary
    with the project's flags; none of the built-in ones do today.
    """
    builders = {
        ProjectTemplate.BLANK: _blank,
        ProjectTemplate.ECOMMERCE: _ecommerce,
        ProjectTemplate.SOCIAL_MEDIA: _social_media,
        ProjectTemplate.FITNESS_TRACKER: _fitness_tracker,
        ProjectTemplate.FINANCE_APP: _finance_app,
        ProjectTemplate.FOOD_DELIVERY: _food_delivery,
        ProjectTemplate.CHAT_APP: _chat_app,
    }
    return builders[template](config)


def _blank(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(required_features=("home",))


def _ecommerce(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "cached_network_image": "^3.3.0",
            "shimmer": "^3.0.0",
            "badges": "^3.1.0",
        },
        required_features=("products", "cart", "checkout", "orders", "auth", "search"),
    )


def _social_media(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "cached_network_image": "^3.3.0",
            "image_picker": "^1.0.0",
            "timeago": "^3.5.0",
        },
        required_features=("auth", "profile", "posts", "comments", "likes", "feed"),
    )


def _fitness_tracker(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "fl_chart": "^0.65.0",
            "table_calendar": "^3.0.9",
            "intl": "^0.20.2",
        },
        required_features=(
            "workouts", "exercises", "progress", "goals", "statistics", "calendar",
        ),
    )


def _finance_app(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "fl_chart": "^0.65.0",
            "intl": "^0.20.2",
            "currency_formatter": "^2.2.0",
        },
        required_features=("transactions", "categories", "budgets", "analytics", "reports"),
    )


def _food_delivery(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "cached_network_image": "^3.3.0",
            "badges": "^3.1.0",
            "flutter_rating_bar": "^4.0.1",
        },
        required_features=("restaurants", "menu", "cart", "orders", "tracking", "auth"),
    )


def _chat_app(config: BlueprintConfig) -> TemplateBundle:
    return TemplateBundle(
        additional_dependencies={
            "image_picker": "^1.0.0",
            "file_picker": "^6.0.0",
            "timeago": "^3.5.0",
            "badges": "^3.1.0",
        },
        required_features=("auth", "chats", "messages", "contacts", "media", "notifications"),
    )


def feature_modules(config: BlueprintConfig) -> list[str]:
    """Feature modules to scaffold beyond the built-in ``home`` feature."""
    bundle = get_template(config.project_template, config)
    return [name for name in bundle.required_features if name != "home"]
