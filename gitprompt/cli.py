import click

from gitprompt import git_ops
from gitprompt.parser import parse_status
from gitprompt.render import render_prompt


@click.group(context_settings={"help_option_names": ["-h", "--help"]}, invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context) -> None:
    """gitprompt: colored git status segment for shell prompts."""
    if ctx.invoked_subcommand is not None:
        return
    output = git_ops.status_porcelain()
    if output is None:
        return
    click.echo(render_prompt(parse_status(output)), color=True)


@main.command("shell-init")
def shell_init() -> None:
    """Print prompt helpers for gitprompt (bash/zsh + fish)."""
    bash = r'''PROMPT_COMMAND='__gitprompt_segment="$(command gitprompt)"'"${PROMPT_COMMAND:+;$PROMPT_COMMAND}"
PS1='\w${__gitprompt_segment} \$ '
'''
    zsh = r'''setopt PROMPT_SUBST
PROMPT='%~$(command gitprompt) %# '
'''
    fish = r'''function fish_prompt
  printf '%s%s $ ' (prompt_pwd) (command gitprompt)
end
'''
    click.echo("# bash\n" + bash + "\n# zsh\n" + zsh + "\n# fish\n" + fish)


if __name__ == "__main__":
    main()
