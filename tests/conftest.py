import hypothesis

# Operator dispatch on first call can exceed hypothesis' default deadline.
hypothesis.settings.register_profile("torchmoments", deadline=None)
hypothesis.settings.load_profile("torchmoments")
