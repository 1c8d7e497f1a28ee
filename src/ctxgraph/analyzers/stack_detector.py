"""Technology stack detection from a merged dependency mapping.

Detection is an ordered list of rules. Each rule tests for the presence of
one or more dependency keys:
- Single-valued rules (framework, build tool): the first matching rule wins
  and later rules for the same field are skipped, so a framework that bundles
  a lower-level tool must be listed before that tool.
- Set-valued rules (navigation, state management, ...): every matching rule
  fires and appends its canonical name once.

No filesystem or network access happens here.
"""

import logging
from dataclasses import dataclass

from ctxgraph.models.stack import Platform, StackProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackRule:
    """Maps any of ``keys`` to a canonical library name."""

    keys: tuple[str, ...]
    name: str

    def matches(self, deps: dict[str, str]) -> bool:
        return any(key in deps for key in self.keys)


@dataclass(frozen=True)
class FrameworkRule(StackRule):
    """Framework rule that also fixes the platform."""

    mobile: bool = False


# =============================================================================
# Single-valued rules (order encodes precedence)
# =============================================================================

FRAMEWORK_RULES: tuple[FrameworkRule, ...] = (
    FrameworkRule(("expo",), "Expo", mobile=True),
    FrameworkRule(("react-native",), "React Native", mobile=True),
    FrameworkRule(("next",), "Next.js"),
)

BUILD_TOOL_RULES: tuple[StackRule, ...] = (
    StackRule(("next",), "Next.js"),
    StackRule(("vite",), "Vite"),
    StackRule(("react-scripts",), "Create React App"),
    StackRule(("expo",), "Expo CLI"),
    StackRule(("@expo/metro-runtime", "metro"), "Metro"),
)

# =============================================================================
# Set-valued rules (all matches fire, in order)
# =============================================================================

CATEGORY_RULES: dict[str, tuple[StackRule, ...]] = {
    "navigation": (
        StackRule(("@react-navigation/native",), "React Navigation"),
        StackRule(("@react-navigation/stack",), "Stack Navigator"),
        StackRule(("@react-navigation/bottom-tabs",), "Bottom Tabs"),
        StackRule(("@react-navigation/drawer",), "Drawer Navigator"),
        StackRule(("expo-router",), "Expo Router"),
        StackRule(("next",), "Next.js File-based Routing"),
    ),
    "state_management": (
        StackRule(("zustand",), "Zustand"),
        StackRule(("redux", "@reduxjs/toolkit"), "Redux"),
        StackRule(("mobx",), "MobX"),
        StackRule(("jotai",), "Jotai"),
        StackRule(("recoil",), "Recoil"),
        StackRule(("@legendapp/state",), "Legend State"),
    ),
    "api_layer": (
        StackRule(("@apollo/client",), "Apollo Client"),
        StackRule(("react-query", "@tanstack/react-query"), "React Query"),
        StackRule(("trpc", "@trpc/client"), "tRPC"),
        StackRule(("axios",), "Axios"),
        StackRule(("graphql",), "GraphQL"),
        StackRule(("swr",), "SWR"),
    ),
    "ui_library": (
        # web
        StackRule(("@shadcn/ui",), "shadcn/ui"),
        StackRule(("@mui/material",), "Material-UI"),
        StackRule(("@chakra-ui/react",), "Chakra UI"),
        StackRule(("antd",), "Ant Design"),
        # mobile
        StackRule(("react-native-paper",), "React Native Paper"),
        StackRule(("native-base", "@gluestack-ui/themed"), "GlueStack UI"),
        StackRule(("tamagui",), "Tamagui"),
        StackRule(("@rneui/themed", "react-native-elements"), "React Native Elements"),
    ),
    "testing": (
        StackRule(("vitest",), "Vitest"),
        StackRule(("jest",), "Jest"),
        StackRule(("@playwright/test",), "Playwright"),
        StackRule(("cypress",), "Cypress"),
        StackRule(("@testing-library/react-native",), "React Native Testing Library"),
        StackRule(("@testing-library/react",), "React Testing Library"),
        StackRule(("detox",), "Detox"),
        StackRule(("maestro",), "Maestro"),
    ),
    "css": (
        StackRule(("tailwindcss",), "Tailwind CSS"),
        StackRule(("nativewind",), "NativeWind"),
        StackRule(("styled-components",), "Styled Components"),
        StackRule(("@emotion/react",), "Emotion"),
        StackRule(("sass",), "SASS/SCSS"),
        StackRule(("react-native-unistyles",), "Unistyles"),
    ),
    "backend": (
        StackRule(("@supabase/supabase-js",), "Supabase"),
        StackRule(("firebase", "@react-native-firebase/app"), "Firebase"),
        StackRule(("@prisma/client",), "Prisma"),
        StackRule(("express",), "Express"),
        StackRule(("fastify",), "Fastify"),
        StackRule(("hono",), "Hono"),
        StackRule(("@aws-sdk/client-dynamodb",), "AWS DynamoDB"),
        StackRule(("mongoose",), "Mongoose/MongoDB"),
        StackRule(("drizzle", "drizzle-orm"), "Drizzle ORM"),
    ),
    "database": (
        StackRule(("@prisma/client",), "Prisma"),
        StackRule(("drizzle-orm",), "Drizzle"),
        StackRule(("@supabase/supabase-js",), "Supabase (PostgreSQL)"),
        StackRule(("mongoose",), "MongoDB"),
        StackRule(("typeorm",), "TypeORM"),
        StackRule(("knex",), "Knex.js"),
        StackRule(("expo-sqlite",), "Expo SQLite"),
        StackRule(("@nozbe/watermelondb",), "WatermelonDB"),
        StackRule(("realm",), "Realm"),
    ),
}

UNIVERSAL_MARKER = "react-native-web"


def _first_match(rules: tuple[StackRule, ...], deps: dict[str, str]) -> StackRule | None:
    for rule in rules:
        if rule.matches(deps):
            return rule
    return None


def _clean_version(version: str | None) -> str | None:
    """Strip a leading range operator (``^`` or ``~``) from a version."""
    if not version:
        return None
    return version.lstrip("^~").strip() or None


class StackDetector:
    """Derives a StackProfile from a merged dependency mapping.

    Rule tables default to the module-level constants and can be replaced
    per instance.
    """

    def __init__(
        self,
        framework_rules: tuple[FrameworkRule, ...] = FRAMEWORK_RULES,
        build_tool_rules: tuple[StackRule, ...] = BUILD_TOOL_RULES,
        category_rules: dict[str, tuple[StackRule, ...]] | None = None,
    ) -> None:
        self.framework_rules = framework_rules
        self.build_tool_rules = build_tool_rules
        self.category_rules = category_rules if category_rules is not None else CATEGORY_RULES

    def detect(self, deps: dict[str, str]) -> StackProfile:
        """Detect the technology stack.

        Args:
            deps: Dependency name to declared version (runtime + development)

        Returns:
            Immutable StackProfile
        """
        framework_rule = _first_match(self.framework_rules, deps)
        build_tool_rule = _first_match(self.build_tool_rules, deps)

        platform = Platform.WEB
        if isinstance(framework_rule, FrameworkRule) and framework_rule.mobile:
            platform = Platform.UNIVERSAL if UNIVERSAL_MARKER in deps else Platform.MOBILE

        categories: dict[str, tuple[str, ...]] = {}
        for category, rules in self.category_rules.items():
            names: list[str] = []
            for rule in rules:
                if rule.matches(deps) and rule.name not in names:
                    names.append(rule.name)
            categories[category] = tuple(names)

        profile = StackProfile(
            framework=framework_rule.name if framework_rule else None,
            platform=platform,
            build_tool=build_tool_rule.name if build_tool_rule else None,
            typescript="typescript" in deps,
            react_version=_clean_version(deps.get("react")),
            **categories,
        )

        logger.debug(
            "Detected stack: framework=%s platform=%s build_tool=%s",
            profile.framework,
            profile.platform.value,
            profile.build_tool,
        )
        return profile


def detect_stack(deps: dict[str, str]) -> StackProfile:
    """Detect the technology stack with the default rule tables.

    Args:
        deps: Dependency name to declared version

    Returns:
        StackProfile
    """
    return StackDetector().detect(deps)
