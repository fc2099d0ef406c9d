from .sync_service import StakingSyncService, derive_categories, is_stablecoin
