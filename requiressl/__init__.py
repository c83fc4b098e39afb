"""Force SSL on selected pages of a Django site and leave it everywhere else."""
