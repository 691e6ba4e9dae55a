"""
End-to-end test automation for the XQ Fitness mobile app.

Page objects drive the iOS app through Appium; tasks compose them into user
intents; the fluent proxy lets journeys queue page steps and run them with a
single await.
"""

from .fluent_proxy import FluentProxy, Invocation, create_fluent_proxy, pending_steps

__all__ = ["FluentProxy", "Invocation", "create_fluent_proxy", "pending_steps"]
