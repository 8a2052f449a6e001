"""Reading book lists and reporting them grouped by author and genre."""