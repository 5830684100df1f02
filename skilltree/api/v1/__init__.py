"""
API v1 routes.
"""

from fastapi import APIRouter

from skilltree.api.v1 import checkpoints, mastery, tree

router = APIRouter()

router.include_router(tree.router, prefix="/tree", tags=["Skill Tree"])
router.include_router(mastery.router, prefix="/mastery", tags=["Mastery"])
router.include_router(checkpoints.router, prefix="/checkpoints", tags=["Checkpoints"])
