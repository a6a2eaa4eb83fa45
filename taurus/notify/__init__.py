"""Provider-neutral notification model and sender protocol."""