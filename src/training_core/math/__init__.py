"""Pure math for the training core: signal estimation and periodization."""
