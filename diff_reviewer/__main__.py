from diff_reviewer.main import main

main()
