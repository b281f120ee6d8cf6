"""Kubeflow setup for a single VM (MicroK8s + Juju), resumable.

Core design goals:
- Ordered, named steps
- One persisted progress token
- Idempotent steps, safe to re-run after a failure or a re-login
- Centralized logging of every external command
"""

__all__ = []
