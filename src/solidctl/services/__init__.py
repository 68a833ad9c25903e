"""Service layer: one service per demo, all returning ServiceResult."""
