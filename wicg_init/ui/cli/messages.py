"""
Fixed console texts: the logo, the usage example and the closing notes.
"""

LOGO = r"""
 __      __.___  _________  ________
/  \    /  \   | \_   ___ \/  _____/
\   \/\/   /   | /    \  \/   \  ___
 \        /|   | \     \___\    \_\  \
  \__/\  / |___|  \______  /\______  /
       \/                \/        \/
        Web Platform Incubator CG
"""

EXAMPLE = """
  Example:

    $ mkdir my-api && cd my-api
    $ wicg-init init "The Widget API"
"""

FINISHED = """
  🎉 All done! Next steps:

    1. Edit index.html and describe your proposal.
    2. Create the repository under https://github.com/WICG and push:
         git remote add origin git@github.com:WICG/<repo>.git
         git push -u origin <branch>
    3. Tell the community group about it at https://discourse.wicg.io/
"""
